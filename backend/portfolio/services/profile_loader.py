import asyncio
from typing import Callable, List, Optional, Tuple

from loguru import logger

from ..datasources.base import ProfileSource
from ..schemas import GitHubPanel, LoadState, ProfileSummary, RepositoryRecord
from .aggregation import summarize

FeaturedList = Tuple[RepositoryRecord, ...]
LoadResult = Tuple[ProfileSummary, FeaturedList]
Listener = Callable[[GitHubPanel], None]


class ProfileDataAggregator:
    """Owns the GitHub panel state and is its only writer.

    Each ``load`` is one fetch cycle: the panel goes to ``loading``, both
    endpoints are requested concurrently, and the cycle settles as ``loaded``
    or ``failed``. Failures are logged once and never re-raised.
    """

    def __init__(self, source: ProfileSource, username: str = ""):
        self.source = source
        self._panel = GitHubPanel(username=username, state=LoadState.LOADING)
        self._listeners: List[Listener] = []
        self._inflight: Optional[asyncio.Task] = None

    @property
    def state(self) -> LoadState:
        return self._panel.state

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    def snapshot(self) -> GitHubPanel:
        return self._panel

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every settled panel; returns an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def load(self, username: str) -> Optional[LoadResult]:
        """Run one fetch cycle for ``username``.

        A call made while a cycle is in flight joins that cycle instead of
        issuing new requests, whatever username it was given.
        """
        if not username or not username.strip():
            raise ValueError("username must be a non-empty identifier")

        if self.in_flight:
            logger.debug(f"GitHub load already in flight for '{self._panel.username}', joining it")
        else:
            self._panel = GitHubPanel(username=username, state=LoadState.LOADING)
            self._inflight = asyncio.ensure_future(self._run(username))
        # callers going away must not abort the cycle
        return await asyncio.shield(self._inflight)

    async def aclose(self) -> None:
        """Stop an in-flight cycle at shutdown; the panel keeps its last state."""
        if not self.in_flight:
            return
        self._inflight.cancel()
        try:
            await self._inflight
        except asyncio.CancelledError:
            logger.info(f"Abandoned GitHub load for '{self._panel.username}' at shutdown")

    async def _run(self, username: str) -> Optional[LoadResult]:
        logger.info(f"Loading GitHub data for '{username}'")
        try:
            profile, repos = await asyncio.gather(
                self.source.fetch_profile(username),
                self.source.fetch_repositories(username),
            )
            summary, featured = summarize(profile, repos)
        except Exception:
            logger.exception(f"Error fetching GitHub data for '{username}'")
            self._publish(GitHubPanel(username=username, state=LoadState.FAILED))
            return None

        logger.info(
            f"Loaded GitHub data for '{username}': {len(repos)} repositories fetched, "
            f"{len(featured)} featured"
        )
        self._publish(
            GitHubPanel(
                username=username,
                state=LoadState.LOADED,
                summary=summary,
                featured=list(featured),
            )
        )
        return summary, featured

    def _publish(self, panel: GitHubPanel) -> None:
        self._panel = panel
        for listener in list(self._listeners):
            try:
                listener(panel)
            except Exception:
                logger.exception("GitHub panel listener raised")
