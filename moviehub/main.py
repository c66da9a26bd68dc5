# moviehub/main.py

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, APIRouter
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from moviehub.api.routers import logs, movies
from moviehub.web_ui.routes import router as ui_router
from moviehub.core.config import Settings, get_settings
from moviehub.core.httpclient import create_tmdb_client, create_tmdb_limiter
from moviehub.core.logger import setup_logger, set_level
from moviehub.core.refresh import create_refresh_scheduler
from moviehub.services.movies import MovieRepository
from moviehub.services.tmdb import TMDbApi
from moviehub.viewmodel.movies import MovieViewModel, PopularMoviesSource

logger = setup_logger(__name__)

STATIC_DIR = Path(__file__).parent / "web_ui" / "static"


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[PopularMoviesSource] = None,
) -> FastAPI:
    """
    Build the application. A *repository* given here replaces the TMDb one
    (no HTTP client is created then).
    """
    settings = settings or get_settings()
    set_level(settings.log_level_value)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # 1) One shared HTTP client, injected down the stack
        client = None
        source = repository
        if source is None:
            client = create_tmdb_client(settings)
            api = TMDbApi(client, settings, limiter=create_tmdb_limiter(settings))
            source = MovieRepository(api)
            if not settings.tmdb_api_key:
                logger.warning("tmdb_api_key is empty; TMDb will reject requests")

        # 2) View state lives as long as the application
        view_model = MovieViewModel(source, discard_stale=settings.discard_stale_responses)
        app.state.view_model = view_model

        # 3) Optional periodic refresh
        scheduler = create_refresh_scheduler(view_model, settings.auto_refresh_minutes)
        if scheduler:
            scheduler.start()
            logger.info("Auto refresh every %d minute(s)", settings.auto_refresh_minutes)

        try:
            yield
        finally:
            if scheduler:
                scheduler.shutdown(wait=False)
            view_model.close()
            if client is not None:
                await client.aclose()
            logger.info("MovieHub stopped")

    app = FastAPI(title="MovieHub", lifespan=lifespan)
    app.state.settings = settings

    # Web UI
    app.include_router(ui_router)

    # API v1 routers
    api_v1 = APIRouter(prefix="/api/v1", tags=["API"])
    api_v1.include_router(movies.router, prefix="/movies")
    api_v1.include_router(logs.router,   prefix="/logs")
    app.include_router(api_v1)

    # Static files for the UI
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return FileResponse(STATIC_DIR / "img" / "placeholder.svg")

    return app


app = create_app()
