from typing import List, Protocol

from ..schemas import ProfileMetadata, RepositoryRecord


class ProfileFetchError(RuntimeError):
    """Raised when a profile endpoint cannot be read or understood."""

    def __init__(self, message: str, endpoint: str, status_code: int | None = None):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class ProfileSource(Protocol):
    async def fetch_profile(self, username: str) -> ProfileMetadata:
        ...

    async def fetch_repositories(self, username: str) -> List[RepositoryRecord]:
        ...
