"""
Centralized logging for wordrank.

Every module calls ``get_logger(__name__)`` and gets a child of the
``wordrank`` logger.  Output goes to stderr through rich's ``RichHandler``
so it never mixes with the rank printed on stdout.  A rotating log file can
be added through the ``logging.file`` setting.

Default level is **WARNING**.  ``wordrank --verbose`` switches to DEBUG and
shows the per-position ranking trace.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 1 * 1024 * 1024  # 1 MB per file
BACKUP_COUNT = 2
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ROOT_LOGGER_NAME = "wordrank"


def _resolve_level(level: str | None) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def _root() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        # Silent until configure_logging() installs real handlers.
        root.addHandler(logging.NullHandler())
        root.setLevel(_resolve_level(DEFAULT_LOG_LEVEL))
    return root


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger for the given module name.

    Typical usage at the top of each module::

        from wordrank.logger import get_logger
        logger = get_logger(__name__)
    """
    _root()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def configure_logging(level: str | None = None, log_file: str | Path | None = None) -> logging.Logger:
    """Install the stderr handler (and optional file handler) on the root logger.

    Safe to call repeatedly; previous handlers are replaced.
    """
    root = _root()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(_resolve_level(level))
    root.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(path),
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)

    root.debug("Logging configured at %s", logging.getLevelName(root.level))
    return root
