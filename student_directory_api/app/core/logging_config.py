"""
Logging configuration for the Student Directory API.

The application and uvicorn share one output format, so the access
log and the store's ``Created student ...`` lines read as a single
stream.  ``setup_logging`` installs the application's handlers on the
root logger; ``uvicorn_log_config`` builds the ``dictConfig`` that
``run.py`` gives to uvicorn so its own loggers forward to those
handlers instead of printing in uvicorn's format.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "student_directory.console"
FILE_HANDLER = "student_directory.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def level_from_name(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its number.

    Unknown names fall back to ``INFO``.
    """
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the application's console and file handlers to the root logger.

    Each handler is installed at most once, recognised by its name, so
    repeated ``create_app`` calls do not duplicate output.  Handlers
    added by others (pytest's capture, for example) are left alone.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        Path of a file that receives a copy of the log (``LOG_FILE``).
    """
    root = logging.getLogger()
    root.setLevel(level_from_name(level))

    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and FILE_HANDLER not in installed:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def uvicorn_log_config(level: str = "INFO") -> Dict[str, Any]:
    """Return a uvicorn ``log_config`` routing its loggers to the root handlers."""
    level_name = logging.getLevelName(level_from_name(level))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "loggers": {
            name: {"handlers": [], "level": level_name, "propagate": True}
            for name in UVICORN_LOGGERS
        },
    }
