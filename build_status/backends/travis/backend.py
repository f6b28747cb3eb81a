"""Travis CI backend implementation."""

import asyncio
import itertools
import logging
from collections.abc import AsyncGenerator, Mapping, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from build_status.backends.base import BuildBackend
from build_status.backends.travis.config import TravisCIConfig
from build_status.backends.travis.models import (
    BuildsResponse,
    ReposResponse,
    TravisBuild,
    TravisCommit,
    TravisRepo,
)
from build_status.models.build import Build, BuildState, Commit
from build_status.transport import fetch_json

log = logging.getLogger(__name__)

STATE_TO_BUILD_STATE: Mapping[str, BuildState] = {
    "passed": "success",
    "success": "success",
    "failed": "failed",
    "errored": "failed",
    "created": "started",
    "received": "started",
    "queued": "started",
    "started": "started",
    "canceled": "canceled",
}


@dataclass(frozen=True, kw_only=True)
class TravisCIBackend(BuildBackend):
    """Travis CI backend.

    Lists the accessible repositories, then fetches the builds of every
    repository concurrently. The combined result is only produced once every
    repository has answered; the first failing request fails the whole fetch.
    """

    config: TravisCIConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: TravisCIConfig
    ) -> AsyncGenerator["TravisCIBackend", None]:
        """Create backend with managed session lifecycle."""
        headers = {
            "Accept": "application/vnd.travis-ci.2+json",
            "Authorization": f"token {config.token.get_secret_value()}",
        }
        async with aiohttp.ClientSession(headers=headers) as session:
            yield cls(config=config, session=session)

    async def fetch_builds(self) -> Sequence[Build]:
        """Fetch builds of all accessible repositories."""
        repos = await self.list_repos()
        log.info("Fetching builds for %d repositories", len(repos))

        tasks = [asyncio.create_task(self.fetch_repo_builds(repo)) for repo in repos]
        try:
            # gather keeps request order and returns at once for an empty list
            per_repo = await asyncio.gather(*tasks)
        except BaseException:
            # siblings must not outlive the session, their outcomes are dropped
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return list(itertools.chain.from_iterable(b for b in per_repo if b))

    async def list_repos(self) -> Sequence[TravisRepo]:
        """List repositories visible to the token."""
        data = await fetch_json(self.session, self.config.url)
        return ReposResponse.model_validate(data).repos

    async def fetch_repo_builds(self, repo: TravisRepo) -> Sequence[Build]:
        """Fetch and translate the builds of one repository."""
        url = f"{self.config.url.rstrip('/')}/{repo.slug}/builds"
        data = await fetch_json(self.session, url)
        response = BuildsResponse.model_validate(data)

        repository = repo_name(repo.slug)
        commits = {commit.id: commit for commit in response.commits}

        builds: list[Build] = []
        for raw in response.builds:
            commit = commits.get(raw.commit_id)
            if commit is None:
                log.warning(
                    "Build %s of %s references unknown commit %s, skipping",
                    raw.id,
                    repo.slug,
                    raw.commit_id,
                )
                continue
            builds.append(translate_build(repository, raw, commit))
        return builds


def repo_name(slug: str) -> str:
    """Drop the owner prefix from an owner/name slug."""
    _, _, name = slug.partition("/")
    return name or slug


def translate_build(repository: str, raw: TravisBuild, commit: TravisCommit) -> Build:
    """Combine a raw build and its commit into a canonical build."""
    return Build(
        repository=repository,
        branch=commit.branch,
        started=raw.started_at,
        state=STATE_TO_BUILD_STATE.get(raw.state, "unknown"),
        commit=Commit(
            created=commit.committed_at,
            author=commit.author_name,
            hash=commit.sha,
        ),
    )
