# moviehub/api/routers/movies.py

from contextlib import aclosing
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sse_starlette.sse import EventSourceResponse

from moviehub.api.deps import get_app_settings, get_view_model
from moviehub.api.schemas import ViewStateResponse
from moviehub.core.config import Settings
from moviehub.core.logger import setup_logger
from moviehub.viewmodel.movies import MovieViewModel

router = APIRouter(tags=["movies"])
logger = setup_logger(__name__)


@router.get("/state", response_model=ViewStateResponse, name="movies.get_state")
async def get_state(
    vm: MovieViewModel = Depends(get_view_model),
    settings: Settings = Depends(get_app_settings),
):
    return ViewStateResponse.from_state(vm.state.value, settings)


@router.post("/load", response_model=ViewStateResponse, name="movies.load")
async def load_movies(
    wait: bool = False,
    vm: MovieViewModel = Depends(get_view_model),
    settings: Settings = Depends(get_app_settings),
):
    """
    Start a popular-movies load. With ``?wait=true`` the response is sent
    once the load has been applied.
    """
    task = vm.load_popular_movies()
    if wait:
        await task
    return ViewStateResponse.from_state(vm.state.value, settings)


@router.get("/stream/state", name="movies.stream_state")
async def stream_state(
    limit: Optional[int] = Query(None, ge=1),
    vm: MovieViewModel = Depends(get_view_model),
    settings: Settings = Depends(get_app_settings),
):
    """
    SSE endpoint: current view state first, then every change. ``?limit=N``
    closes the stream after N events.
    """
    logger.info("[UI] Client connected to state stream")

    async def event_generator():
        sent = 0
        async with aclosing(vm.state.stream()) as states:
            async for state in states:
                payload = ViewStateResponse.from_state(state, settings)
                sent += 1
                yield {"event": "state", "data": payload.model_dump_json()}
                if limit is not None and sent >= limit:
                    break

    return EventSourceResponse(
        event_generator(),
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no"
        }
    )
