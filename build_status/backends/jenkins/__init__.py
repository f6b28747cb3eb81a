"""Jenkins backend module."""

from build_status.backends.jenkins.backend import JenkinsBackend
from build_status.backends.jenkins.config import JenkinsConfig
from build_status.backends.jenkins.manifest import jenkins_manifest

__all__ = ["JenkinsBackend", "JenkinsConfig", "jenkins_manifest"]
