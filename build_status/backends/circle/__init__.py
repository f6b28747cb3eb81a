"""CircleCI backend module."""

from build_status.backends.circle.backend import CircleCIBackend
from build_status.backends.circle.config import CircleCIConfig
from build_status.backends.circle.manifest import circle_manifest

__all__ = ["CircleCIBackend", "CircleCIConfig", "circle_manifest"]
