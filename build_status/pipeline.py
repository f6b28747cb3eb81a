"""Fetch, normalize and aggregate builds from the configured backend."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from build_status.aggregator import aggregate
from build_status.backends.loading import load_backend_manifest
from build_status.models.build import Build
from build_status.models.filter import BuildFilter

log = logging.getLogger(__name__)


async def fetch_builds(
    mode: str,
    backend_config: Mapping[str, Any],
    build_filter: BuildFilter | None = None,
) -> Sequence[Build]:
    """Run the build status pipeline once.

    Args:
        mode: Backend mode (e.g., "circle", "travis", "jenkins")
        backend_config: Raw backend configuration (url, token)
        build_filter: Repository and branch filters, none if omitted

    Returns:
        Filtered, deduplicated builds ordered by start time

    Raises:
        BackendNotFoundError: If mode names no registered backend
        BuildStatusError: If any request to the service fails

    """
    manifest = load_backend_manifest(mode)
    config = manifest.config_cls.model_validate(dict(backend_config))

    log.info("Fetching builds from %s (%s)", manifest.name, config.url)
    async with manifest.backend_factory(config) as backend:
        raw_builds = await backend.fetch_builds()
    log.info("Fetched %d raw build(s)", len(raw_builds))

    return aggregate(raw_builds, build_filter or BuildFilter())
