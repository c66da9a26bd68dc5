# moviehub/core/config.py
import json
from logging import _nameToLevel
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# ─── 1) Locate the JSON file ──────────────────────────────────────────────────
# Lives next to this module:  moviehub/core/config.json

BASE_DIR    = Path(__file__).parent           # .../moviehub/core
CONFIG_PATH = BASE_DIR / "config.json"


# ─── 2) Validated settings model ──────────────────────────────────────────────
class Settings(BaseModel):
    # TMDb
    tmdb_api_key:    str = ""
    tmdb_api_base:   str = "https://api.themoviedb.org/3"
    tmdb_image_base: str = "https://image.tmdb.org/t/p"
    tmdb_language:   Optional[str] = "en-US"

    poster_size:   str = Field("w500", description="Image size segment for posters")
    backdrop_size: str = Field("w780", description="Image size segment for backdrops")

    # HTTP
    request_timeout: float = Field(10.0, gt=0)
    tmdb_rate_limit: int   = Field(40, ge=1, description="Requests allowed per 10 seconds")

    # View state
    discard_stale_responses: bool = Field(
        False,
        description="Ignore responses from loads superseded by a newer call",
    )
    auto_refresh_minutes: int = Field(
        0,
        ge=0,
        description="Reload popular movies every N minutes (0 disables)",
    )

    log_level: str = "INFO"

    # ─── normalise blank language into None ─────────────────────────────────
    @field_validator("tmdb_language", mode="before")
    @classmethod
    def _none_if_blank_language(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _nameToLevel:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return _nameToLevel[self.log_level]


# ─── 3) Cached loader for settings ───────────────────────────────────────────
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and return the Settings instance from config.json, cached in-memory.
    Calling get_settings again returns the same object without re-reading disk.
    """
    if not CONFIG_PATH.exists():
        raise FileNotFoundError(f"Cannot find config.json at {CONFIG_PATH!r}")
    with CONFIG_PATH.open(encoding="utf-8") as f:
        data = json.load(f)
    return Settings(**data)


def reload_settings() -> None:
    """
    Clear the cached Settings so that next get_settings() re-reads config.json.
    """
    get_settings.cache_clear()
