"""Jenkins backend implementation."""

import base64
import logging
from collections.abc import AsyncGenerator, Callable, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone

import aiohttp

from build_status.backends.base import BuildBackend
from build_status.backends.jenkins.config import JenkinsConfig
from build_status.backends.jenkins.models import (
    JenkinsBuild,
    JenkinsJob,
    JenkinsProject,
    JenkinsRoot,
)
from build_status.models.build import Build, BuildState, Commit
from build_status.transport import fetch_json

log = logging.getLogger(__name__)

CAUSE_ACTION_CLASS = "hudson.model.CauseAction"

# Jenkins has no flat list of builds, so projects, jobs and their builds are
# fetched in one nested tree query.
TREE = (
    "name,url,jobs[name,url,jobs[name,url,"
    "actions[contributor,contributorDisplayName,contributorEmail],"
    "buildable,builds[result,building,actions[causes[shortDescription]],"
    "changeSets[items[author[fullName],timestamp,commitId]],timestamp]]]"
)


def from_millis(timestamp: int | None) -> datetime | None:
    """Convert a Jenkins epoch-milliseconds timestamp."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)


def build_state(build: JenkinsBuild) -> BuildState:
    """Map the latest build of a job onto a canonical state."""
    if build.building:
        return "started"
    if build.result == "ABORTED":
        return "canceled"
    if build.result == "SUCCESS":
        return "success"
    return "failed"


def last_change_set_commit(job: JenkinsJob) -> Commit | None:
    """Last commit of the first change set of the newest build that has one.

    Only the first change set is considered, so with several SCMs this is
    not necessarily the most recent commit overall.
    """
    build = next((b for b in job.builds if b.change_sets), None)
    if build is None or not build.change_sets[0].items:
        return None

    item = build.change_sets[0].items[-1]
    return Commit(
        created=from_millis(item.timestamp),
        author=item.author.full_name if item.author else None,
        hash=item.commit_id,
    )


def responsible_contributor(job: JenkinsJob) -> Commit | None:
    """Contributor of the job, e.g. the author of a pull request."""
    action = next(
        (a for a in job.actions if a.contributor or a.contributor_display_name),
        None,
    )
    if action is None:
        return None

    return Commit(
        created=from_millis(job.timestamp),
        author=action.contributor_display_name or action.contributor,
    )


def build_cause(job: JenkinsJob) -> Commit | None:
    """Causes of the newest build with actions, joined as the author."""
    build = next((b for b in job.builds if b.actions), None)
    if build is None:
        return None

    descriptions = [
        cause.short_description
        for action in build.actions
        if action.class_name == CAUSE_ACTION_CLASS
        for cause in action.causes
        if cause.short_description
    ]
    if not descriptions:
        return None

    return Commit(author=";".join(descriptions))


COMMIT_RESOLVERS: Sequence[Callable[[JenkinsJob], Commit | None]] = (
    last_change_set_commit,
    responsible_contributor,
    build_cause,
)


def resolve_commit(job: JenkinsJob) -> Commit:
    """Return the commit from the first resolver that finds one."""
    for resolver in COMMIT_RESOLVERS:
        if (commit := resolver(job)) is not None:
            return commit
    return Commit()


@dataclass(frozen=True, kw_only=True)
class JenkinsBackend(BuildBackend):
    """Jenkins backend.

    Every buildable job of every top-level project becomes one build: the
    project name is used as repository and the job name as branch.
    """

    config: JenkinsConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: JenkinsConfig
    ) -> AsyncGenerator["JenkinsBackend", None]:
        """Create backend with managed session lifecycle."""
        headers: dict[str, str] = {}
        if config.token is not None:
            credentials = config.token.get_secret_value().encode("utf-8")
            headers["Authorization"] = (
                f"Basic {base64.b64encode(credentials).decode('ascii')}"
            )
        async with aiohttp.ClientSession(headers=headers) as session:
            yield cls(config=config, session=session)

    async def fetch_builds(self) -> Sequence[Build]:
        """Fetch the latest build of every buildable job."""
        url = f"{self.config.url.rstrip('/')}/api/json"
        data = await fetch_json(
            self.session, url, params={"depth": "4", "tree": TREE}
        )
        root = JenkinsRoot.model_validate(data)

        return [
            build
            for project in root.jobs
            for build in self.translate_project(project)
        ]

    def translate_project(self, project: JenkinsProject) -> Sequence[Build]:
        """Translate the buildable jobs of one project."""
        builds: list[Build] = []
        for job in project.jobs:
            if not job.buildable:
                log.debug("Skipping job %s/%s, not buildable", project.name, job.name)
                continue

            latest = job.builds[0] if job.builds else JenkinsBuild()
            builds.append(
                Build(
                    repository=project.name,
                    branch=job.name,
                    started=from_millis(latest.timestamp),
                    state=build_state(latest),
                    commit=resolve_commit(job),
                )
            )
        return builds
