# moviehub/web_ui/routes.py

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse, HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.status import HTTP_303_SEE_OTHER

from moviehub.api.deps import get_app_settings, get_view_model
from moviehub.core.config import Settings
from moviehub.core.images import backdrop_url, poster_url
from moviehub.core.logger import setup_logger
from moviehub.core.models.movie import Movie
from moviehub.viewmodel.movies import MovieViewModel

router = APIRouter()
logger = setup_logger(__name__)
BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.filters["rating"] = lambda value: f"{float(value or 0.0):.1f}"


def detail_url(request: Request, movie: Movie) -> str:
    """Link to the detail page carrying a copy of the movie's fields."""
    url = request.url_for("detail_page", movie_id=movie.id)
    return str(url.include_query_params(**movie.detail_params()))


@router.get("/", include_in_schema=False, response_class=HTMLResponse)
async def home_page(
    request: Request,
    vm: MovieViewModel = Depends(get_view_model),
    settings: Settings = Depends(get_app_settings),
):
    """
    Render the popular movies grid. The first visit starts the initial load.
    """
    state = vm.state.value
    if state.movies is None and not state.is_loading and state.error_message is None:
        logger.info("[UI] First visit, loading popular movies")
        vm.load_popular_movies()
        state = vm.state.value

    cards = [
        {
            "movie": movie,
            "poster_url": poster_url(movie.poster_path, settings),
            "detail_url": detail_url(request, movie),
        }
        for movie in state.movies or ()
    ]
    return templates.TemplateResponse(
        request,
        "home.html",
        {"state": state, "cards": cards},
    )


@router.post("/refresh", include_in_schema=False)
async def refresh(request: Request, vm: MovieViewModel = Depends(get_view_model)):
    vm.load_popular_movies()
    return RedirectResponse(request.url_for("home_page"), status_code=HTTP_303_SEE_OTHER)


@router.get("/movie/{movie_id}", include_in_schema=False, response_class=HTMLResponse)
async def detail_page(
    request: Request,
    movie_id: int,
    title: Optional[str] = None,
    poster_path: Optional[str] = None,
    backdrop_path: Optional[str] = None,
    overview: str = "",
    vote_average: float = 0.0,
    release_date: str = "",
    settings: Settings = Depends(get_app_settings),
):
    """
    Render one movie from the values carried in the link; nothing is fetched.
    """
    if not title:
        return RedirectResponse(request.url_for("home_page"), status_code=HTTP_303_SEE_OTHER)

    movie = Movie(
        id=movie_id,
        title=title,
        poster_path=poster_path or None,
        backdrop_path=backdrop_path or None,
        overview=overview,
        vote_average=vote_average,
        release_date=release_date,
    )
    return templates.TemplateResponse(
        request,
        "detail.html",
        {
            "movie": movie,
            "poster_url": poster_url(movie.poster_path, settings),
            "backdrop_url": backdrop_url(movie.backdrop_path, settings),
        },
    )
