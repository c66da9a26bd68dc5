# moviehub/core/httpclient.py

from httpx import AsyncClient, Limits, Timeout
from aiolimiter import AsyncLimiter

from moviehub.core.config import Settings


def create_tmdb_client(settings: Settings, **kwargs) -> AsyncClient:
    """
    Build the one-and-only AsyncClient for the TMDb API.

    Created once by the application lifespan and handed to TMDbApi; extra
    keyword arguments (e.g. ``transport``) are passed straight to httpx.
    """
    return AsyncClient(
        base_url=settings.tmdb_api_base,
        limits=Limits(
            max_connections=20,
            max_keepalive_connections=10
        ),
        timeout=Timeout(settings.request_timeout),
        **kwargs,
    )


def create_tmdb_limiter(settings: Settings) -> AsyncLimiter:
    # Rate limiter parameterized by settings
    return AsyncLimiter(
        max_rate=settings.tmdb_rate_limit,
        time_period=10
    )
