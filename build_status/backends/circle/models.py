"""Pydantic models for CircleCI API responses."""

from collections.abc import Mapping, Sequence
from datetime import datetime

from pydantic import BaseModel, TypeAdapter


class CircleBuild(BaseModel):
    """A build summary listed under a branch."""

    build_num: int = 0
    status: str | None = None  # set on running builds
    outcome: str | None = None  # set on recent builds
    pushed_at: datetime | None = None
    vcs_revision: str | None = None


class CircleBranch(BaseModel):
    """Running and recent builds of one branch."""

    running_builds: Sequence[CircleBuild] | None = None
    recent_builds: Sequence[CircleBuild] | None = None


class CircleProject(BaseModel):
    """A followed project from the projects endpoint."""

    reponame: str
    branches: Mapping[str, CircleBranch] = {}


ProjectList = TypeAdapter(list[CircleProject])
