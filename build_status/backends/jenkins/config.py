"""Configuration for Jenkins backend."""

from build_status.backends.config import BackendConfig


class JenkinsConfig(BackendConfig):
    """Configuration for Jenkins backend.

    Jenkins has no public default URL. The token, when set, is the
    "user:api-token" pair sent with Basic authentication.
    """
