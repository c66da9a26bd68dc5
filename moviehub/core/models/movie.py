# moviehub/core/models/movie.py
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
from datetime import datetime


@dataclass(frozen=True)
class Movie:
    id: int
    title: str
    poster_path: Optional[str]
    backdrop_path: Optional[str]
    overview: str
    vote_average: float
    release_date: str

    @classmethod
    def from_tmdb(cls, data: Dict[str, Any]) -> "Movie":
        """Build a Movie from one TMDb result object; ``id`` is required."""
        return cls(
            id=int(data["id"]),
            title=data.get("title") or "",
            poster_path=data.get("poster_path") or None,
            backdrop_path=data.get("backdrop_path") or None,
            overview=data.get("overview") or "",
            vote_average=float(data.get("vote_average") or 0.0),
            release_date=data.get("release_date") or "",
        )

    @property
    def year(self) -> Optional[int]:
        try:
            # datetime.fromisoformat handles “YYYY-MM-DD”
            dt = datetime.fromisoformat(self.release_date)
            return dt.year
        except (ValueError, TypeError):
            return None

    def detail_params(self) -> Dict[str, str]:
        """Value copy of the fields shown on the detail screen."""
        params = {
            "title": self.title,
            "overview": self.overview,
            "vote_average": f"{self.vote_average}",
            "release_date": self.release_date,
        }
        if self.poster_path:
            params["poster_path"] = self.poster_path
        if self.backdrop_path:
            params["backdrop_path"] = self.backdrop_path
        return params


@dataclass(frozen=True)
class MoviePage:
    page: int = 1
    results: Tuple[Movie, ...] = field(default_factory=tuple)
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def from_tmdb(cls, data: Dict[str, Any]) -> "MoviePage":
        # a page without "results" is treated as an empty page
        results = data.get("results") or []
        return cls(
            page=int(data.get("page") or 1),
            results=tuple(Movie.from_tmdb(r) for r in results),
            total_pages=int(data.get("total_pages") or 0),
            total_results=int(data.get("total_results") or 0),
        )
