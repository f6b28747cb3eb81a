"""Configuration for CircleCI backend."""

from pydantic import SecretStr

from build_status.backends.config import BackendConfig


class CircleCIConfig(BackendConfig):
    """Configuration for CircleCI backend.

    The token is sent as the circle-token query parameter.
    """

    url: str = "https://circleci.com/api/v1/projects"
    token: SecretStr
