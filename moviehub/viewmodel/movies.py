# moviehub/viewmodel/movies.py

import asyncio
from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol, Set, Tuple

from moviehub.core.logger import setup_logger
from moviehub.core.models.movie import Movie
from moviehub.core.models.results import LoadFailure, LoadResult, LoadSuccess
from moviehub.viewmodel.observable import MutableStateSlot, StateSlot

logger = setup_logger(__name__)


class PopularMoviesSource(Protocol):
    async def fetch_popular_movies(self) -> LoadResult[Tuple[Movie, ...]]: ...


@dataclass(frozen=True)
class MovieViewState:
    movies: Optional[Tuple[Movie, ...]] = None   # None until the first successful load
    is_loading: bool = False
    error_message: Optional[str] = None


class MovieViewModel:
    """
    Owns the popular-movies screen state and the load operation.

    State is published twice: as one ``state`` snapshot and as three
    per-field slots (``movies``, ``is_loading``, ``error_message``). The
    snapshot is updated first, so a snapshot observer never sees a
    half-applied load; it skips snapshots equal to the previous one. Every
    per-field slot written by a transition notifies, even with an unchanged
    value, in the order movies, error_message, is_loading.

    Overlapping loads are not serialized: by default whichever response
    arrives last wins. With ``discard_stale=True`` only the response of the
    most recent call is applied.
    """

    def __init__(self, repository: PopularMoviesSource, discard_stale: bool = False):
        self._repository = repository
        self._discard_stale = discard_stale
        self._generation = 0
        self._pending: Set[asyncio.Task] = set()
        self._closed = False

        self._state: MutableStateSlot[MovieViewState] = MutableStateSlot(MovieViewState())
        self._movies: MutableStateSlot[Optional[Tuple[Movie, ...]]] = MutableStateSlot(None)
        self._is_loading: MutableStateSlot[bool] = MutableStateSlot(False)
        self._error_message: MutableStateSlot[Optional[str]] = MutableStateSlot(None)

    # ─── read-only observation ──────────────────────────────────────────────
    @property
    def state(self) -> StateSlot[MovieViewState]:
        return self._state

    @property
    def movies(self) -> StateSlot[Optional[Tuple[Movie, ...]]]:
        return self._movies

    @property
    def is_loading(self) -> StateSlot[bool]:
        return self._is_loading

    @property
    def error_message(self) -> StateSlot[Optional[str]]:
        return self._error_message

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    # ─── operations ─────────────────────────────────────────────────────────
    def load_popular_movies(self) -> "asyncio.Task[LoadResult]":
        """
        Start loading popular movies on the running event loop.

        ``is_loading`` is already True when this returns; the returned task
        resolves to the repository's result once it has been applied.
        """
        if self._closed:
            raise RuntimeError("MovieViewModel is closed")
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        self._apply(is_loading=True)
        logger.debug("[STATE] Load #%d started", generation)

        task = loop.create_task(self._load(generation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _load(self, generation: int) -> LoadResult:
        try:
            result = await self._repository.fetch_popular_movies()
        except Exception as exc:
            logger.exception("[STATE] Load #%d failed unexpectedly", generation)
            result = LoadFailure(str(exc) or exc.__class__.__name__)

        if self._discard_stale and generation != self._generation:
            logger.info(
                "[STATE] Dropping response of load #%d (latest is #%d)",
                generation, self._generation,
            )
            return result

        if isinstance(result, LoadSuccess):
            self._apply(movies=tuple(result.value), error_message=None, is_loading=False)
            logger.info("[STATE] Load #%d applied %d movies", generation, len(result.value))
        else:
            self._apply(error_message=result.message, is_loading=False)
            logger.info("[STATE] Load #%d failed: %s", generation, result.message)
        return result

    def _apply(self, **changes: Any) -> None:
        self._state.set_value(replace(self._state.value, **changes))
        if "movies" in changes:
            self._movies.set_value(changes["movies"], force=True)
        if "error_message" in changes:
            self._error_message.set_value(changes["error_message"], force=True)
        if "is_loading" in changes:
            self._is_loading.set_value(changes["is_loading"], force=True)

    def close(self) -> None:
        """Cancel in-flight loads and drop every observer."""
        self._closed = True
        for task in list(self._pending):
            task.cancel()
        for slot in (self._state, self._movies, self._is_loading, self._error_message):
            slot.clear_observers()
