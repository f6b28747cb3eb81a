"""Pydantic models for the Jenkins JSON API tree projection."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class JenkinsAuthor(BaseModel):
    """Author of a change set item."""

    full_name: str | None = Field(default=None, alias="fullName")


class ChangeSetItem(BaseModel):
    """A commit in a change set."""

    author: JenkinsAuthor | None = None
    timestamp: int | None = None  # epoch milliseconds
    commit_id: str | None = Field(default=None, alias="commitId")


class ChangeSet(BaseModel):
    """Commits that went into a build."""

    items: Sequence[ChangeSetItem] = ()


class Cause(BaseModel):
    """Why a build was triggered."""

    short_description: str | None = Field(default=None, alias="shortDescription")


class BuildAction(BaseModel):
    """An action attached to a build. Only cause actions carry causes."""

    class_name: str | None = Field(default=None, alias="_class")
    causes: Sequence[Cause] = ()


class JenkinsBuild(BaseModel):
    """A build of a job."""

    result: str | None = None  # SUCCESS, FAILURE, UNSTABLE, ABORTED, NOT_BUILT
    building: bool = False
    timestamp: int | None = None  # epoch milliseconds
    actions: Sequence[BuildAction] = ()
    change_sets: Sequence[ChangeSet] = Field(default=(), alias="changeSets")


class JobAction(BaseModel):
    """An action attached to a job, e.g. a pull request contributor."""

    contributor: str | None = None
    contributor_display_name: str | None = Field(
        default=None, alias="contributorDisplayName"
    )


class JenkinsJob(BaseModel):
    """A job of a project, one per branch for multibranch projects."""

    name: str
    buildable: bool = False
    timestamp: int | None = None
    actions: Sequence[JobAction] = ()
    builds: Sequence[JenkinsBuild] = ()


class JenkinsProject(BaseModel):
    """A top-level job or folder."""

    name: str
    jobs: Sequence[JenkinsJob] = ()


class JenkinsRoot(BaseModel):
    """Root object of the Jenkins JSON API."""

    jobs: Sequence[JenkinsProject] = ()
