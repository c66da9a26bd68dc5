import asyncio
import logging
from datetime import timedelta

from moviehub.api.routers.logs import line_matches
from moviehub.core.models.results import LoadSuccess
from moviehub.core.refresh import JOB_ID, create_refresh_scheduler
from moviehub.viewmodel.movies import MovieViewModel

from conftest import ScriptedRepository


def test_refresh_disabled_by_default():
    vm = MovieViewModel(ScriptedRepository(LoadSuccess(())))
    assert create_refresh_scheduler(vm, 0) is None


def test_refresh_job_reloads_movies(two_movies):
    repo = ScriptedRepository(LoadSuccess(two_movies))
    vm = MovieViewModel(repo)
    scheduler = create_refresh_scheduler(vm, 15)

    job = scheduler.get_job(JOB_ID)
    assert job.trigger.interval == timedelta(minutes=15)

    asyncio.run(job.func())
    assert repo.calls == 1
    assert vm.movies.value == two_movies


LINE = "2025-01-01 10:00:00 WARNING  [SERVICES.MOVIES] [TMDB] Popular movies returned 401"


def test_log_line_level_filter():
    assert line_matches(LINE, logging.INFO, set())
    assert not line_matches(LINE, logging.ERROR, set())


def test_log_line_category_filter():
    assert line_matches(LINE, logging.DEBUG, {"SERVICES"})
    assert line_matches(LINE, logging.DEBUG, {"SERVICES.MOVIES", "VIEWMODEL.MOVIES"})
    assert not line_matches(LINE, logging.DEBUG, {"VIEWMODEL"})
