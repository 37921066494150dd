"""Logging for the API process: one rotating log file plus the console.

The application logger tree and the server/scheduler library loggers share
the same handlers, since ``uvicorn.run`` is started with ``log_config=None``.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

APP_LOGGER = "recruit_assistant"
LOG_FILE = "recruit_assistant.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3

# library logger -> minimum level it is allowed to emit at
LIBRARY_LOGGERS = {
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "apscheduler": logging.WARNING,
}


def resolve_level(level: int | str) -> int:
    """Accept ``logging.DEBUG`` or ``"debug"``; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers(log_path: Path, level: int) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = [
        RotatingFileHandler(
            log_path / LOG_FILE,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        ),
        logging.StreamHandler(sys.stdout),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_dir: str = "logs", level: int | str = logging.INFO) -> logging.Logger:
    """Attach file and console handlers; safe to call more than once."""
    level = resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    handlers = _build_handlers(log_path, level)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)
    app_logger.handlers.clear()
    for handler in handlers:
        app_logger.addHandler(handler)

    for name, floor in LIBRARY_LOGGERS.items():
        lib_logger = logging.getLogger(name)
        lib_logger.setLevel(max(level, floor))
        lib_logger.handlers.clear()
        lib_logger.propagate = False
        for handler in handlers:
            lib_logger.addHandler(handler)

    return app_logger
