# moviehub/api/schemas.py

from pydantic import BaseModel
from typing import List, Optional

from moviehub.core.config import Settings
from moviehub.core.images import backdrop_url, poster_url
from moviehub.core.models.movie import Movie
from moviehub.viewmodel.movies import MovieViewState


class MovieOut(BaseModel):
    id:            int
    title:         str
    poster_path:   Optional[str]
    backdrop_path: Optional[str]
    overview:      str
    vote_average:  float
    release_date:  str
    poster_url:    Optional[str]
    backdrop_url:  Optional[str]

    @classmethod
    def from_movie(cls, movie: Movie, settings: Settings) -> "MovieOut":
        return cls(
            id=movie.id,
            title=movie.title,
            poster_path=movie.poster_path,
            backdrop_path=movie.backdrop_path,
            overview=movie.overview,
            vote_average=movie.vote_average,
            release_date=movie.release_date,
            poster_url=poster_url(movie.poster_path, settings),
            backdrop_url=backdrop_url(movie.backdrop_path, settings),
        )


class ViewStateResponse(BaseModel):
    movies:        Optional[List[MovieOut]]
    is_loading:    bool
    error_message: Optional[str]

    @classmethod
    def from_state(cls, state: MovieViewState, settings: Settings) -> "ViewStateResponse":
        movies = None
        if state.movies is not None:
            movies = [MovieOut.from_movie(m, settings) for m in state.movies]
        return cls(
            movies=movies,
            is_loading=state.is_loading,
            error_message=state.error_message,
        )
