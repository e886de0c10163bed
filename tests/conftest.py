"""Shared fixtures: GitHub payload builders, a fake profile source, log capture."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest
from loguru import logger

from portfolio.schemas import ProfileMetadata, RepositoryRecord


@pytest.fixture
def anyio_backend():
    return "asyncio"


def _repo_payload(repo_id: int = 1, **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": repo_id,
        "name": f"repo-{repo_id}",
        "description": f"Description of repo {repo_id}",
        "html_url": f"https://github.com/octocat/repo-{repo_id}",
        "homepage": None,
        "language": "Python",
        "stargazers_count": 0,
        "forks_count": 0,
        "updated_at": "2025-01-15T00:00:00Z",
        "topics": [],
        "fork": False,
    }
    data.update(overrides)
    return data


@pytest.fixture
def repo_payload() -> Callable[..., dict[str, Any]]:
    """Build one raw item of GET /users/{username}/repos."""
    return _repo_payload


@pytest.fixture
def make_repo() -> Callable[..., RepositoryRecord]:
    def _make(repo_id: int = 1, **overrides: Any) -> RepositoryRecord:
        return RepositoryRecord.model_validate(_repo_payload(repo_id, **overrides))

    return _make


class FakeProfileSource:
    """In-memory ProfileSource recording calls.

    ``profile``/``repos`` may be a value or an exception instance to raise.
    ``gate`` (when set) holds the repositories fetch until released.
    """

    def __init__(self, profile: Any = None, repos: Any = None):
        self.profile = profile if profile is not None else ProfileMetadata(public_repos=0)
        self.repos = repos if repos is not None else []
        self.gate: asyncio.Event | None = None
        self.profile_calls = 0
        self.repo_calls = 0

    async def fetch_profile(self, username: str) -> ProfileMetadata:
        self.profile_calls += 1
        await asyncio.sleep(0)
        if isinstance(self.profile, BaseException):
            raise self.profile
        return self.profile

    async def fetch_repositories(self, username: str) -> list[RepositoryRecord]:
        self.repo_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        await asyncio.sleep(0)
        if isinstance(self.repos, BaseException):
            raise self.repos
        return self.repos


@pytest.fixture
def fake_source() -> FakeProfileSource:
    return FakeProfileSource()


@pytest.fixture
def error_logs():
    """Collect loguru records at ERROR and above for the duration of a test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="ERROR")
    yield records
    logger.remove(handler_id)
