"""Unit tests for the GitHub adapter, driven through httpx.MockTransport."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from portfolio.datasources.base import ProfileFetchError
from portfolio.datasources.github_adapter import REPOS_PAGE_SIZE, GitHubAdapter
from portfolio.schemas import LoadState
from portfolio.services.profile_loader import ProfileDataAggregator


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _adapter(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubAdapter:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="https://api.github.com"
    )
    return GitHubAdapter(client=client)


def _profile_json() -> dict:
    return {"login": "octocat", "public_repos": 12, "name": "A", "bio": "x", "followers": 3}


# ═══════════════════════════════════════════════════════════════════════════
# Successful reads
# ═══════════════════════════════════════════════════════════════════════════


class TestFetchProfile:
    @pytest.mark.anyio
    async def test_parses_profile_and_sends_no_auth(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_profile_json())

        adapter = _adapter(handler)
        profile = await adapter.fetch_profile("octocat")
        await adapter.aclose()

        assert profile.public_repos == 12
        assert profile.name == "A"
        assert seen[0].url.path == "/users/octocat"
        assert "authorization" not in seen[0].headers
        assert seen[0].headers["accept"] == "application/vnd.github+json"

    @pytest.mark.anyio
    async def test_missing_optional_fields_default(self):
        adapter = _adapter(lambda request: httpx.Response(200, json={"login": "octocat"}))

        profile = await adapter.fetch_profile("octocat")

        assert profile.public_repos == 0
        assert profile.bio is None


class TestFetchRepositories:
    @pytest.mark.anyio
    async def test_requests_most_recent_page(self, repo_payload):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json=[
                    repo_payload(1, topics=["ml", "finance"], homepage="https://demo.example"),
                    repo_payload(2, description=None, language=None, fork=True),
                ],
            )

        adapter = _adapter(handler)
        repos = await adapter.fetch_repositories("octocat")

        request = seen[0]
        assert request.url.path == "/users/octocat/repos"
        assert request.url.params["sort"] == "updated"
        assert request.url.params["per_page"] == str(REPOS_PAGE_SIZE)
        assert [r.id for r in repos] == [1, 2]
        assert repos[0].topics == ["ml", "finance"]
        assert repos[0].homepage == "https://demo.example"
        assert repos[1].fork is True
        assert repos[1].language is None
        assert repos[0].updated_at.year == 2025

    @pytest.mark.anyio
    async def test_empty_list(self):
        adapter = _adapter(lambda request: httpx.Response(200, json=[]))

        assert await adapter.fetch_repositories("octocat") == []


# ═══════════════════════════════════════════════════════════════════════════
# Failures collapse into ProfileFetchError
# ═══════════════════════════════════════════════════════════════════════════


class TestFailures:
    @pytest.mark.anyio
    async def test_non_success_status(self):
        adapter = _adapter(
            lambda request: httpx.Response(404, json={"message": "Not Found"})
        )

        with pytest.raises(ProfileFetchError) as excinfo:
            await adapter.fetch_profile("ghost")

        assert excinfo.value.status_code == 404
        assert excinfo.value.endpoint == "/users/ghost"

    @pytest.mark.anyio
    async def test_username_is_quoted_into_one_path_segment(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        adapter = _adapter(handler)
        await adapter.fetch_repositories("team/app?x=1")

        assert seen[0].url.raw_path.startswith(b"/users/team%2Fapp%3Fx%3D1/repos?")
        assert "x" not in seen[0].url.params

    @pytest.mark.anyio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = _adapter(handler)

        with pytest.raises(ProfileFetchError) as excinfo:
            await adapter.fetch_repositories("octocat")

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    @pytest.mark.anyio
    async def test_non_json_body(self):
        adapter = _adapter(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ProfileFetchError):
            await adapter.fetch_profile("octocat")

    @pytest.mark.anyio
    async def test_unexpected_repository_shape(self):
        adapter = _adapter(
            lambda request: httpx.Response(200, json={"message": "API rate limit exceeded"})
        )

        with pytest.raises(ProfileFetchError):
            await adapter.fetch_repositories("octocat")

    @pytest.mark.anyio
    async def test_repository_missing_required_field(self, repo_payload):
        broken = repo_payload(1)
        del broken["html_url"]
        adapter = _adapter(lambda request: httpx.Response(200, json=[broken]))

        with pytest.raises(ProfileFetchError):
            await adapter.fetch_repositories("octocat")


# ═══════════════════════════════════════════════════════════════════════════
# Adapter + aggregator
# ═══════════════════════════════════════════════════════════════════════════


class TestAggregatorOverAdapter:
    @pytest.mark.anyio
    async def test_loaded_end_to_end(self, repo_payload):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/repos"):
                return httpx.Response(
                    200,
                    json=[
                        repo_payload(1, language="TypeScript", stargazers_count=3, forks_count=1),
                        repo_payload(
                            2, fork=True, language="TypeScript", stargazers_count=5, forks_count=2
                        ),
                    ],
                )
            return httpx.Response(200, json=_profile_json())

        aggregator = ProfileDataAggregator(_adapter(handler))
        await aggregator.load("octocat")

        panel = aggregator.snapshot()
        assert panel.state is LoadState.LOADED
        assert panel.summary.total_repos == 12
        assert panel.summary.total_stars == 8
        assert panel.summary.total_forks == 3
        assert [r.id for r in panel.featured] == [1]

    @pytest.mark.anyio
    async def test_one_failing_endpoint_fails_cycle(self, error_logs):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/repos"):
                return httpx.Response(500, text="server error")
            return httpx.Response(200, json=_profile_json())

        aggregator = ProfileDataAggregator(_adapter(handler))
        await aggregator.load("octocat")

        assert aggregator.state is LoadState.FAILED
        assert aggregator.snapshot().summary is None
        assert len(error_logs) == 1
