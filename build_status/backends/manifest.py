"""Backend manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from build_status.backends.base import BuildBackend
from build_status.backends.config import BackendConfig

ConfigT = TypeVar("ConfigT", bound=BackendConfig)


@dataclass(frozen=True, kw_only=True)
class BackendManifest(Generic[ConfigT]):
    """Manifest describing a backend plugin.

    The manifest contains references to the configuration class and the
    backend factory function for lazy loading of backends based on their mode.
    """

    name: str
    config_cls: type[ConfigT]
    backend_factory: Callable[[ConfigT], AbstractAsyncContextManager[BuildBackend]]
