import asyncio

import httpx

from moviehub.core.config import Settings
from moviehub.services.tmdb import TMDbApi


def _capture(settings: Settings, call):
    """Run *call(api)* against a mock transport and return the request it sent."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    async def scenario():
        async with httpx.AsyncClient(
            base_url=settings.tmdb_api_base, transport=httpx.MockTransport(handler)
        ) as client:
            await call(TMDbApi(client, settings))

    asyncio.run(scenario())
    assert len(seen) == 1
    return seen[0]


def test_popular_movies_request(settings):
    request = _capture(settings, lambda api: api.get_popular_movies())
    assert request.method == "GET"
    assert request.url.path == "/3/movie/popular"
    assert request.url.params["api_key"] == "test-key"
    assert request.url.params["language"] == "en-US"
    assert request.url.params["page"] == "1"


def test_movie_details_request(settings):
    request = _capture(settings, lambda api: api.get_movie_details(550))
    assert request.url.path == "/3/movie/550"
    assert request.url.params["api_key"] == "test-key"
    assert "page" not in request.url.params


def test_search_request(settings):
    request = _capture(settings, lambda api: api.search_movies("star wars", page=2))
    assert request.url.path == "/3/search/movie"
    assert request.url.params["query"] == "star wars"
    assert request.url.params["page"] == "2"


def test_language_is_omitted_when_not_configured():
    settings = Settings(tmdb_api_key="k", tmdb_language=None)
    request = _capture(settings, lambda api: api.get_popular_movies())
    assert "language" not in request.url.params
    assert request.url.params["api_key"] == "k"
