"""
Logging for the service and the uvicorn server running it.

``setup_logging`` attaches a console handler, plus a file handler when
``LOG_FILE`` is set, to the root logger.  The ``uvicorn`` loggers are
stripped of their own handlers and made to propagate, so request and
server logs from ``run.py`` land in the same handlers as the
application's.  ``LOG_LEVEL`` applies to both.
"""

import logging
from pathlib import Path
from typing import List

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_handlers(config: Settings) -> List[logging.Handler]:
    """Return the console handler and, if configured, the file handler."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        log_path = Path(config.log_file).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Settings) -> None:
    """Configure application and server logging from ``config``.

    Root handlers are installed only once; a root logger that already
    has handlers (a second ``create_app()``, pytest) is left alone.
    The server loggers are reset on every call.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(level)
        for handler in build_handlers(config):
            root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True
