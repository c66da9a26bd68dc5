# moviehub/services/tmdb.py

from typing import Optional, Dict, Any

import httpx
from aiolimiter import AsyncLimiter

from moviehub.core.config import Settings
from moviehub.core.httpclient import create_tmdb_limiter
from moviehub.core.logger import setup_logger


logger = setup_logger(__name__)


class TMDbApi:
    """
    The remote TMDb operations and their request shaping.

    Transport is delegated to the injected ``httpx.AsyncClient`` (its base URL
    must point at the TMDb v3 API). Every call returns the raw response;
    ``httpx.RequestError`` propagates to the caller.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
        limiter: Optional[AsyncLimiter] = None,
    ):
        self._client = client
        self._settings = settings
        self._limiter = limiter or create_tmdb_limiter(settings)

    def _params(self, **extra: Any) -> Dict[str, Any]:
        params: Dict[str, Any] = {"api_key": self._settings.tmdb_api_key}
        if self._settings.tmdb_language:
            params["language"] = self._settings.tmdb_language
        params.update({k: v for k, v in extra.items() if v is not None})
        return params

    async def _get(self, endpoint: str, params: Dict[str, Any]) -> httpx.Response:
        async with self._limiter:
            logger.debug("[TMDB] GET %s", endpoint)
            return await self._client.get(endpoint, params=params)

    async def get_popular_movies(self, page: int = 1) -> httpx.Response:
        return await self._get("/movie/popular", self._params(page=page))

    async def get_movie_details(self, movie_id: int) -> httpx.Response:
        return await self._get(f"/movie/{movie_id}", self._params())

    async def search_movies(self, query: str, page: int = 1) -> httpx.Response:
        return await self._get("/search/movie", self._params(query=query, page=page))
