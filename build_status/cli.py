"""CLI entry point for fetching build statuses."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from build_status.backends.loading import BackendNotFoundError, backend_options
from build_status.errors import BuildStatusError
from build_status.models.build import Build
from build_status.models.filter import BuildFilter
from build_status.pipeline import fetch_builds

STATE_SYMBOLS = {
    "success": "✅",
    "failed": "❌",
    "started": "⏳",
    "canceled": "⛔",
    "unknown": "?",
}


def log_builds_summary(log: logging.Logger, builds: Sequence[Build]) -> None:
    """Log a formatted summary of build statuses."""
    log.info("=" * 80)
    log.info("Build Status Summary:")
    log.info("=" * 80)

    for build in builds:
        symbol = STATE_SYMBOLS.get(build.state, "?")
        log.info(
            "%s %s/%s: %s",
            symbol,
            build.repository,
            build.branch,
            build.state,
        )
        if build.commit.author:
            log.info("  Author: %s", build.commit.author)


def format_output(builds: Sequence[Build]) -> dict[str, Any]:
    """Format builds for JSON output."""
    results: list[dict[str, Any]] = []
    for build in builds:
        results.append(
            {
                "repository": build.repository,
                "branch": build.branch,
                "started": build.started.isoformat() if build.started else None,
                "state": build.state,
                "commit": {
                    "created": (
                        build.commit.created.isoformat()
                        if build.commit.created
                        else None
                    ),
                    "author": build.commit.author,
                    "hash": build.commit.hash,
                },
            }
        )

    return {
        "total": len(results),
        "success": sum(1 for r in results if r["state"] == "success"),
        "failed": sum(1 for r in results if r["state"] == "failed"),
        "started": sum(1 for r in results if r["state"] == "started"),
        "canceled": sum(1 for r in results if r["state"] == "canceled"),
        "unknown": sum(1 for r in results if r["state"] == "unknown"),
        "builds": results,
    }


async def run(
    mode: str,
    backend_config_json: str,
    branch: str | None = None,
    repositories: str | None = None,
) -> int:
    """Fetch builds and return exit code."""
    log = logging.getLogger("build_status")

    try:
        builds = await fetch_builds(
            mode,
            json.loads(backend_config_json),
            BuildFilter(branch=branch, repositories=repositories),
        )
    except (BuildStatusError, BackendNotFoundError, ValidationError) as e:
        log.error("Failed to fetch builds: %s", e)
        return 1

    log_builds_summary(log, builds)
    print(json.dumps(format_output(builds), indent=2))
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fetch the latest build status of every branch from a CI service"
    )
    parser.add_argument(
        "--mode",
        default="circle",
        help="Backend mode (circle, travis, jenkins)",
    )
    parser.add_argument(
        "--backend-config",
        default="{}",
        help="JSON configuration for the backend (url, token)",
    )
    parser.add_argument(
        "--branch",
        default=None,
        help="Regular expression branch names must match",
    )
    parser.add_argument(
        "--repositories",
        default=None,
        help="Comma-separated repositories to include",
    )
    parser.add_argument(
        "--list-backends",
        action="store_true",
        help="Print available backends with their default URLs and exit",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.list_backends:
        print(json.dumps(backend_options(), indent=2))
        sys.exit(0)

    exit_code = asyncio.run(
        run(
            mode=args.mode,
            backend_config_json=args.backend_config,
            branch=args.branch,
            repositories=args.repositories,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
