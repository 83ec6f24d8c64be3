"""
Logging setup for the user store service.

Records from the store (``Created user 3``), the snapshot layer
(load warnings, write failures) and the HTTP client all go through
``logging.getLogger(__name__)`` and end up on the root logger
configured here.  Uvicorn's own loggers are set to the same level so a
single ``LOG_LEVEL`` controls the whole process.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send service logs to the console and, if given, to ``logfile``.

    Does nothing when the root logger already has handlers, which is
    the case under pytest or when ``create_app`` is called again.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        # The snapshot and its log often share a data directory that may not exist yet.
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
