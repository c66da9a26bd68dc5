# moviehub/api/deps.py

from fastapi import Request

from moviehub.core.config import Settings
from moviehub.viewmodel.movies import MovieViewModel


def get_view_model(request: Request) -> MovieViewModel:
    return request.app.state.view_model


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
