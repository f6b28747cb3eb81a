"""Configuration shared by all backends."""

from pydantic import BaseModel, SecretStr


class BackendConfig(BaseModel):
    """Service endpoint and credential."""

    url: str
    token: SecretStr | None = None
