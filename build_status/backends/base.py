"""Abstract base class for CI service backends."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from build_status.models.build import Build


@dataclass(frozen=True, kw_only=True)
class BuildBackend(ABC):
    """Abstract base for CI service backends.

    A backend knows one service's endpoints, authentication convention and
    response schema, and translates whatever the service returns into
    canonical Build records. Filtering, deduplication and ordering are left
    to the aggregator.
    """

    @abstractmethod
    async def fetch_builds(self) -> Sequence[Build]:
        """Fetch the latest build of every branch visible to the backend.

        Returns:
            Unfiltered builds in the order the service reported them

        Raises:
            BuildStatusError: If any request needed for the result fails

        """
