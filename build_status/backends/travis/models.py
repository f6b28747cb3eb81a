"""Pydantic models for Travis CI API v2 responses."""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel


class TravisRepo(BaseModel):
    """A repository from the repos listing."""

    id: int
    slug: str  # owner/name


class ReposResponse(BaseModel):
    """Response from the repos listing endpoint."""

    repos: Sequence[TravisRepo]


class TravisBuild(BaseModel):
    """A build of one repository."""

    id: int
    commit_id: int
    state: str
    started_at: datetime | None = None


class TravisCommit(BaseModel):
    """A commit side-loaded with the builds of a repository."""

    id: int
    branch: str
    sha: str | None = None
    committed_at: datetime | None = None
    author_name: str | None = None


class BuildsResponse(BaseModel):
    """Response from the builds endpoint of one repository."""

    builds: Sequence[TravisBuild]
    commits: Sequence[TravisCommit] = ()
