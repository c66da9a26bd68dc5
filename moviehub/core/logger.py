# moviehub/core/logger.py

import sys
import asyncio
import logging
from logging import Handler

PACKAGE = "moviehub"

# ─── Custom Formatter ────────────────────────────────────────────────────────
class CategoryFormatter(logging.Formatter):
    """Adds ``%(category)s``: an explicit ``extra={"category": ...}`` or the
    logger name without the package prefix, upper-cased."""
    def format(self, record):
        if not hasattr(record, "category"):
            name = record.name
            if name.startswith(PACKAGE + "."):
                name = name[len(PACKAGE) + 1:]
            record.category = name.upper()
        return super().format(record)

# shared formatter for queue & console
formatter = CategoryFormatter(
    fmt="%(asctime)s %(levelname)-8s [%(category)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# ─── In‑memory queue ─────────────────────────────────────────────────────────
# formatted lines waiting for the SSE log stream
log_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=1000)

class AsyncQueueHandler(Handler):
    """Push formatted log records into log_queue, dropping the oldest line when full."""
    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        try:
            log_queue.put_nowait(msg)
        except asyncio.QueueFull:
            log_queue.get_nowait()
            log_queue.put_nowait(msg)

# ─── Public API ───────────────────────────────────────────────────────────────
def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.hasHandlers():
        return logger

    # Prevent duplicate logging by disabling propagation
    logger.propagate = False

    for handler in (logging.StreamHandler(sys.stdout), AsyncQueueHandler()):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_level(level: int) -> None:
    """Apply *level* to every package logger and its handlers."""
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if not name.startswith(PACKAGE) or not isinstance(logger, logging.Logger):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
