"""Canonical build records produced by every backend."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, TypeAlias

BuildState: TypeAlias = Literal["success", "failed", "started", "canceled", "unknown"]


@dataclass(frozen=True, kw_only=True)
class Commit:
    """Commit associated with a build.

    Not every service reports all three fields, so any of them may be None.
    """

    created: datetime | None = None
    author: str | None = None
    hash: str | None = None


@dataclass(frozen=True, kw_only=True)
class Build:
    """Status of the latest build of one branch of one repository."""

    repository: str
    branch: str
    started: datetime | None
    state: BuildState
    commit: Commit = field(default_factory=Commit)
