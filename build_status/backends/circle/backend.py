"""CircleCI backend implementation."""

import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from build_status.backends.base import BuildBackend
from build_status.backends.circle.config import CircleCIConfig
from build_status.backends.circle.models import (
    CircleBranch,
    CircleBuild,
    CircleProject,
    ProjectList,
)
from build_status.models.build import Build, BuildState, Commit
from build_status.transport import fetch_json

log = logging.getLogger(__name__)

STATUS_TO_STATE: Mapping[str, BuildState] = {
    "success": "success",
    "fixed": "success",
    "failed": "failed",
    "timedout": "failed",
    "infrastructure_fail": "failed",
    "no_tests": "failed",
    "running": "started",
    "queued": "started",
    "scheduled": "started",
    "not_running": "started",
    "canceled": "canceled",
}


@dataclass(frozen=True, kw_only=True)
class CircleCIBackend(BuildBackend):
    """CircleCI backend.

    A single request to the projects endpoint returns every followed project
    with its branches and their running and recent builds.
    """

    config: CircleCIConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: CircleCIConfig
    ) -> AsyncGenerator["CircleCIBackend", None]:
        """Create backend with managed session lifecycle."""
        async with aiohttp.ClientSession(
            headers={"Accept": "application/json"},
        ) as session:
            yield cls(config=config, session=session)

    async def fetch_builds(self) -> Sequence[Build]:
        """Fetch the latest build of every branch of every followed project."""
        data = await fetch_json(
            self.session,
            self.config.url,
            params={"circle-token": self.config.token.get_secret_value()},
        )
        projects = ProjectList.validate_python(data)

        builds: list[Build] = []
        for project in projects:
            for branch_name, branch in project.branches.items():
                build = self.translate_branch(project, branch_name, branch)
                if build is not None:
                    builds.append(build)
        return builds

    def translate_branch(
        self, project: CircleProject, branch_name: str, branch: CircleBranch
    ) -> Build | None:
        """Translate the current build of a branch, None if it never built."""
        if branch.running_builds:
            latest = branch.running_builds[0]
            status = latest.status
        elif branch.recent_builds:
            latest = latest_build(branch.recent_builds)
            status = latest.outcome
        else:
            log.warning(
                "Repository %s has a branch named %s that has never been built",
                project.reponame,
                branch_name,
            )
            return None

        return Build(
            repository=project.reponame,
            branch=branch_name,
            started=latest.pushed_at,
            state=STATUS_TO_STATE.get(status or "", "unknown"),
            commit=Commit(
                created=latest.pushed_at,
                author=None,
                hash=latest.vcs_revision,
            ),
        )


def latest_build(builds: Sequence[CircleBuild]) -> CircleBuild:
    """Return the build with the highest build number."""
    return sorted(builds, key=lambda b: b.build_num, reverse=True)[0]
