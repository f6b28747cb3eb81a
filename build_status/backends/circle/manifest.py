"""CircleCI backend manifest."""

from build_status.backends.circle.backend import CircleCIBackend
from build_status.backends.circle.config import CircleCIConfig
from build_status.backends.manifest import BackendManifest

circle_manifest = BackendManifest(
    name="Circle CI",
    config_cls=CircleCIConfig,
    backend_factory=CircleCIBackend.from_config,
)
