# moviehub/api/routers/logs.py
import re
import asyncio
import logging
from logging import _nameToLevel

from fastapi import APIRouter, HTTPException, Request
from sse_starlette.sse import EventSourceResponse

from moviehub.core.logger import log_queue

router = APIRouter(tags=["logs"])
logger = logging.getLogger(__name__)

_LEVEL_RE = re.compile(r"\b(DEBUG|INFO|WARNING|ERROR|CRITICAL)\b")
_CATEGORY_RE = re.compile(r"\[(.*?)\]")


def line_matches(line: str, level: int, categories: set[str]) -> bool:
    """True if a formatted log line passes the level and category filters."""
    if m := _LEVEL_RE.search(line):
        if _nameToLevel.get(m.group(1), logging.INFO) < level:
            return False

    if categories:
        cat_match = _CATEGORY_RE.search(line)
        if not cat_match:
            return False
        log_cat = cat_match.group(1).upper()
        if not any(cat in log_cat for cat in categories):
            return False
    return True


@router.get("/stream/logs", name="logs.stream_logs")
async def stream_logs(request: Request):
    """
    SSE endpoint: stream logs filtered by ?level=INFO and
    ?category=SERVICES.MOVIES,VIEWMODEL.MOVIES; ?limit=N closes the stream
    after N matching lines.
    """
    level_str = request.query_params.get("level", "INFO").upper()
    raw_categories = request.query_params.get("category", "")
    categories = {c.strip().upper() for c in raw_categories.split(",") if c.strip()}
    level = _nameToLevel.get(level_str, logging.INFO)
    raw_limit = request.query_params.get("limit")
    try:
        limit = int(raw_limit) if raw_limit else None
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid limit {raw_limit!r}")
    if limit is not None and limit < 1:
        raise HTTPException(status_code=400, detail="limit must be at least 1")

    logger.info("Client connected to SSE stream with level=%s and categories=%s", level_str, categories or "*")

    async def event_generator():
        sent = 0
        try:
            while limit is None or sent < limit:
                line = await log_queue.get()
                if line_matches(line, level, categories):
                    sent += 1
                    yield line
        except asyncio.CancelledError:
            logger.info("Client disconnected from SSE log stream")
            raise

    return EventSourceResponse(event_generator())
