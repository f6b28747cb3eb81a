"""Travis CI backend manifest."""

from build_status.backends.manifest import BackendManifest
from build_status.backends.travis.backend import TravisCIBackend
from build_status.backends.travis.config import TravisCIConfig

travis_manifest = BackendManifest(
    name="Travis CI",
    config_cls=TravisCIConfig,
    backend_factory=TravisCIBackend.from_config,
)
