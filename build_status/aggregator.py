"""Combine raw backend output into the list shown to users."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime

from build_status.models.build import Build
from build_status.models.filter import BuildFilter

log = logging.getLogger(__name__)


def aggregate(builds: Iterable[Build], build_filter: BuildFilter) -> Sequence[Build]:
    """Filter, deduplicate and order builds.

    Args:
        builds: Builds as returned by a backend
        build_filter: Repository and branch filters

    Returns:
        At most one build per (repository, branch), oldest first.
        When several builds share a key the first one in input order is
        kept, regardless of when it started.

    """
    allowed = build_filter.allowed_repositories()

    unique: dict[tuple[str, str], Build] = {}
    for build in builds:
        if allowed and build.repository not in allowed:
            continue
        if not build_filter.matches_branch(build.branch):
            continue
        unique.setdefault((build.repository, build.branch), build)

    log.debug("Aggregated %d build(s)", len(unique))
    return sorted(unique.values(), key=started_key)


def started_key(build: Build) -> tuple[bool, datetime | None]:
    """Sort key placing builds without a start time first."""
    return (build.started is not None, build.started)
