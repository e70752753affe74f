"""
Logging configuration for the service.

Everything logs through the root logger: the application modules,
uvicorn (which is started with ``log_config=None`` so it does not
install its own handlers) and urllib3 underneath the summary client.
``setup_logging`` attaches the handlers once and sets levels so that
server and HTTP client chatter follows the configured level without
drowning it.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn's loggers follow the application level.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
# Connection pool debug lines from the summary client are only useful
# when the app itself is at DEBUG.
HTTP_CLIENT_LOGGERS = ("urllib3",)


def resolve_level(level: str) -> int:
    """Map a level name to its number, defaulting to ``INFO``."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        return logging.INFO
    return numeric_level


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger and the server/client loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, only the
        console handler is attached.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app may run many times in one process (tests).
        return

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
    client_level = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
