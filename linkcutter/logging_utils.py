"""Optional log output for applications that use linkcutter.

The package itself only attaches a NullHandler (see __init__); the adapters'
`shorten_ok` / `shorten_failed` lines stay silent until the application
either configures logging itself or calls `setup_logging`.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from linkcutter.config import LOG_BACKUPS, LOG_FORMAT, LOG_MAX_BYTES, LOGGER_NAME

# отмечаем свои хендлеры, чтобы не трогать то, что повесило приложение
_OWN_HANDLER_ATTR = "_linkcutter_own"


def _own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWN_HANDLER_ATTR, False)]


def setup_logging(*, debug: bool = False, file_path: str | None = None) -> logging.Logger:
    """Send linkcutter's log lines to stderr, or to a rotating file when `file_path` is set.

    Level is INFO (successes and failures), DEBUG with `debug=True` (every request).
    A repeated call replaces the handler installed by the previous one; the
    NullHandler and handlers added by the application are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for h in _own_handlers(logger):
        logger.removeHandler(h)
        h.close()

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.StreamHandler()

    setattr(handler, _OWN_HANDLER_ATTR, True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
