import asyncio

import pytest

from moviehub.core.config import Settings
from moviehub.core.models.movie import Movie


MOVIE_1 = {
    "id": 1,
    "title": "Movie 1",
    "poster_path": "/poster1.jpg",
    "backdrop_path": "/backdrop1.jpg",
    "overview": "First movie",
    "vote_average": 8.5,
    "release_date": "2024-02-27",
}

MOVIE_2 = {
    "id": 2,
    "title": "Movie 2",
    "poster_path": None,
    "backdrop_path": None,
    "overview": "",
    "vote_average": 7.5,
    "release_date": "2023-11-02",
}


class ScriptedRepository:
    """Answers each fetch with the next scripted result (the last one repeats)."""

    def __init__(self, *results):
        self._results = list(results)
        self.calls = 0

    async def fetch_popular_movies(self):
        self.calls += 1
        await asyncio.sleep(0)
        if len(self._results) > 1:
            return self._results.pop(0)
        return self._results[0]


class DeferredRepository:
    """Every fetch waits on a future the test resolves by hand."""

    def __init__(self):
        self.pending: list[asyncio.Future] = []

    async def fetch_popular_movies(self):
        fut = asyncio.get_running_loop().create_future()
        self.pending.append(fut)
        return await fut


@pytest.fixture
def settings():
    return Settings(
        tmdb_api_key="test-key",
        tmdb_api_base="https://api.themoviedb.org/3",
        tmdb_image_base="https://image.tmdb.org/t/p",
        tmdb_language="en-US",
    )


@pytest.fixture
def two_movies():
    return (Movie.from_tmdb(MOVIE_1), Movie.from_tmdb(MOVIE_2))
