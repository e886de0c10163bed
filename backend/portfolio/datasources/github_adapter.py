from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..config import get_settings
from ..schemas import ProfileMetadata, RepositoryRecord
from .base import ProfileFetchError, ProfileSource

REPOS_SORT = "updated"
REPOS_PAGE_SIZE = 20

_repo_list = TypeAdapter(List[RepositoryRecord])


class GitHubAdapter(ProfileSource):
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.settings = get_settings()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "portfolio-site",
        }
        if client is not None:
            self.client = client
            return
        client_kwargs: dict[str, Any] = {
            "base_url": str(self.settings.github_base_url),
            "timeout": self.settings.github_timeout_seconds,
        }
        if self.settings.github_proxy:
            client_kwargs["proxy"] = self.settings.github_proxy
        self.client = httpx.AsyncClient(**client_kwargs)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_json(self, endpoint: str, params: Optional[dict] = None) -> Any:
        try:
            resp = await self.client.get(endpoint, params=params, headers=self.headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise ProfileFetchError(
                f"GitHub {status}: {exc.response.text}", endpoint, status
            ) from exc
        except httpx.RequestError as exc:
            raise ProfileFetchError(
                f"GitHub request error: {type(exc).__name__} {repr(exc)}", endpoint
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise ProfileFetchError(
                f"GitHub returned a non-JSON body for {endpoint}", endpoint, resp.status_code
            ) from exc

    async def fetch_profile(self, username: str) -> ProfileMetadata:
        endpoint = f"/users/{quote(username, safe='')}"
        data = await self._get_json(endpoint)
        logger.debug(f"Fetched profile metadata for '{username}'")
        try:
            return ProfileMetadata.model_validate(data)
        except ValidationError as exc:
            raise ProfileFetchError(f"Unexpected profile payload: {exc}", endpoint) from exc

    async def fetch_repositories(self, username: str) -> List[RepositoryRecord]:
        """First page of the account's repositories, most recently updated first."""
        endpoint = f"/users/{quote(username, safe='')}/repos"
        params = {"sort": REPOS_SORT, "per_page": REPOS_PAGE_SIZE}
        data = await self._get_json(endpoint, params=params)
        try:
            repos = _repo_list.validate_python(data)
        except ValidationError as exc:
            raise ProfileFetchError(f"Unexpected repository payload: {exc}", endpoint) from exc
        logger.debug(f"Fetched {len(repos)} repositories for '{username}'")
        return repos
