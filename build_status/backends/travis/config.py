"""Configuration for Travis CI backend."""

from pydantic import SecretStr

from build_status.backends.config import BackendConfig


class TravisCIConfig(BackendConfig):
    """Configuration for Travis CI backend (API v2)."""

    url: str = "https://api.travis-ci.com/repos"
    token: SecretStr
