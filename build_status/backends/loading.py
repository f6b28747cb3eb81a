"""Loading of backends from entry points."""

from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any

from build_status.backends.manifest import BackendManifest

ENTRY_POINT_GROUP = "build_status.backends"


class BackendNotFoundError(Exception):
    """Raised when no backend is registered for a mode."""


def load_backend_manifest(mode: str) -> BackendManifest[Any]:
    """Load a backend manifest by mode.

    Args:
        mode: The backend mode as registered in pyproject.toml
              (e.g., "circle", "travis", "jenkins")

    Returns:
        The backend manifest instance

    Raises:
        BackendNotFoundError: If no backend with the given mode is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == mode:
            manifest: BackendManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise BackendNotFoundError(
        f"Backend '{mode}' not found. Available backends: {available}"
    )


def backend_options() -> Mapping[str, Mapping[str, str | None]]:
    """Describe every registered backend with its display name and default URL."""
    options: dict[str, Mapping[str, str | None]] = {}
    for entry in entry_points(group=ENTRY_POINT_GROUP):
        manifest: BackendManifest[Any] = entry.load()
        url_field = manifest.config_cls.model_fields["url"]
        options[entry.name] = {
            "name": manifest.name,
            "url": None if url_field.is_required() else url_field.default,
        }
    return dict(sorted(options.items()))
