"""
Logging configuration for the User List API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Service modules obtain their own logger
via ``logging.getLogger(__name__)`` and never configure handlers
themselves, so everything funnels through the root configuration set
up here.  Uvicorn's loggers propagate to the root as well.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to mirror log records to.  An empty value means
        console only.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest's log capture, repeated create_app
        # calls in tests, or an embedding server).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
