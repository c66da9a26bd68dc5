# moviehub/core/refresh.py

from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from moviehub.core.logger import setup_logger
from moviehub.viewmodel.movies import MovieViewModel

logger = setup_logger(__name__)

JOB_ID = "refresh_popular"


def create_refresh_scheduler(view_model: MovieViewModel, minutes: int) -> Optional[AsyncIOScheduler]:
    """
    Build (but do not start) a scheduler that reloads popular movies every
    *minutes*. Returns None when auto refresh is disabled.
    """
    if minutes <= 0:
        return None

    async def _refresh() -> None:
        logger.info("[REFRESH] Reloading popular movies")
        await view_model.load_popular_movies()

    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        _refresh,
        trigger=IntervalTrigger(minutes=minutes),
        id=JOB_ID,
        max_instances=1,
        coalesce=True,
    )
    return scheduler
