"""Travis CI backend module."""

from build_status.backends.travis.backend import TravisCIBackend
from build_status.backends.travis.config import TravisCIConfig
from build_status.backends.travis.manifest import travis_manifest

__all__ = ["TravisCIBackend", "TravisCIConfig", "travis_manifest"]
