# moviehub/services/movies.py

import asyncio
from typing import Protocol, Sequence, Tuple

import httpx

from moviehub.core.logger import setup_logger
from moviehub.core.models.movie import Movie, MoviePage
from moviehub.core.models.results import LoadFailure, LoadResult, LoadSuccess
from moviehub.services.tmdb import TMDbApi

logger = setup_logger(__name__)


class MoviesListener(Protocol):
    def on_success(self, movies: Sequence[Movie]) -> None: ...

    def on_error(self, message: str) -> None: ...


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class MovieRepository:
    """
    Single point of contact with the remote movie catalog.

    Turns transport outcomes into a LoadSuccess / LoadFailure; exactly one is
    produced per call and nothing is raised.
    """

    def __init__(self, api: TMDbApi):
        self._api = api

    async def fetch_popular_movies(self) -> LoadResult[Tuple[Movie, ...]]:
        try:
            resp = await self._api.get_popular_movies()
        except httpx.RequestError as exc:
            logger.error("[TMDB] Request error for popular movies: %s", exc)
            return LoadFailure(f"Network error: {_describe(exc)}")

        if not resp.is_success or not resp.content:
            logger.warning(
                "[TMDB] Popular movies returned %d %s", resp.status_code, resp.reason_phrase
            )
            return LoadFailure(f"Error: {resp.status_code} - {resp.reason_phrase}")

        try:
            page = MoviePage.from_tmdb(resp.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("[TMDB] Undecodable popular movies body: %s", exc)
            return LoadFailure(f"Error: {resp.status_code} - {resp.reason_phrase}")

        logger.info(
            "[TMDB] Loaded %d popular movies (page %d/%d)",
            len(page.results), page.page, page.total_pages,
        )
        return LoadSuccess(page.results)

    def get_popular_movies(self, listener: MoviesListener) -> "asyncio.Task[None]":
        """
        Listener flavour of fetch_popular_movies: schedules the request on the
        running loop and calls exactly one of the listener's methods. An
        exception raised by the listener is logged and left on the task.
        """
        async def _run() -> None:
            result = await self.fetch_popular_movies()
            if isinstance(result, LoadSuccess):
                listener.on_success(result.value)
            else:
                listener.on_error(result.message)

        task = asyncio.get_running_loop().create_task(_run())
        task.add_done_callback(_report_listener_failure)
        return task


def _report_listener_failure(task: "asyncio.Task[None]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("[TMDB] Movies listener failed: %s", _describe(exc))
