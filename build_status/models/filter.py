"""Filter options applied to the combined build list."""

import re
from collections.abc import Sequence

from pydantic import Field

from build_status.models.base import Model


class BuildFilter(Model):
    """Repository and branch filters for one pipeline run."""

    branch: str | None = Field(
        default=None, description="Regular expression a branch name must match"
    )
    repositories: str | None = Field(
        default=None, description="Comma-separated list of repositories to keep"
    )

    def allowed_repositories(self) -> Sequence[str]:
        """Parse the comma-separated repository allow-list."""
        if not self.repositories:
            return ()
        return tuple(r.strip() for r in self.repositories.split(",") if r.strip())

    def matches_branch(self, branch: str) -> bool:
        """Check a branch name against the configured pattern."""
        if not self.branch:
            return True
        return re.search(self.branch, branch) is not None
