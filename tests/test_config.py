import pytest
from pydantic import ValidationError

from moviehub.core.config import Settings, get_settings, reload_settings


def test_shipped_config_loads_and_is_cached():
    reload_settings()
    first = get_settings()
    assert first.tmdb_api_base == "https://api.themoviedb.org/3"
    assert first.poster_size == "w500"
    assert first.backdrop_size == "w780"
    assert get_settings() is first


def test_reload_rereads_config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text('{"tmdb_api_key": "first"}', encoding="utf-8")
    monkeypatch.setattr("moviehub.core.config.CONFIG_PATH", path)
    reload_settings()
    assert get_settings().tmdb_api_key == "first"

    path.write_text('{"tmdb_api_key": "second"}', encoding="utf-8")
    assert get_settings().tmdb_api_key == "first"
    reload_settings()
    assert get_settings().tmdb_api_key == "second"
    reload_settings()


def test_blank_language_becomes_none():
    assert Settings(tmdb_language="  ").tmdb_language is None


def test_log_level_is_normalised():
    settings = Settings(log_level="debug")
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == 10


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_rate_limit_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(tmdb_rate_limit=0)
