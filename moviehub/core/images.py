# moviehub/core/images.py
"""
TMDb image URLs: ``<image base>/<size segment><relative path>``.
"""
from typing import Optional

from moviehub.core.config import Settings, get_settings


def image_url(path: Optional[str], size: str, settings: Optional[Settings] = None) -> Optional[str]:
    """Return the absolute image URL, or None when there is no path."""
    if not path:
        return None
    settings = settings or get_settings()
    base = settings.tmdb_image_base.rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}/{size}{path}"


def poster_url(path: Optional[str], settings: Optional[Settings] = None) -> Optional[str]:
    settings = settings or get_settings()
    return image_url(path, settings.poster_size, settings)


def backdrop_url(path: Optional[str], settings: Optional[Settings] = None) -> Optional[str]:
    settings = settings or get_settings()
    return image_url(path, settings.backdrop_size, settings)
