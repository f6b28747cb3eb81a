"""Jenkins backend manifest."""

from build_status.backends.jenkins.backend import JenkinsBackend
from build_status.backends.jenkins.config import JenkinsConfig
from build_status.backends.manifest import BackendManifest

jenkins_manifest = BackendManifest(
    name="Jenkins CI",
    config_cls=JenkinsConfig,
    backend_factory=JenkinsBackend.from_config,
)
