from __future__ import annotations
import logging
import os

DEFAULT_LOGLEVEL = logging.WARNING

# printf-style, matching the C `%lf` rendering of numbers
DEFAULT_NUMBER_FORMAT = "%f"


def get_log_level() -> int:
    """Log level from DIVLISP_LOGLEVEL (a level name such as DEBUG or INFO)."""
    raw = os.environ.get("DIVLISP_LOGLEVEL")
    if not raw:
        return DEFAULT_LOGLEVEL
    level = getattr(logging, raw.strip().upper(), None)
    if isinstance(level, int):
        return level
    return DEFAULT_LOGLEVEL


def get_number_format() -> str:
    """Number format from DIVLISP_NUMBER_FORMAT; must format a single float."""
    raw = os.environ.get("DIVLISP_NUMBER_FORMAT")
    if not raw:
        return DEFAULT_NUMBER_FORMAT
    try:
        raw % 1.0
    except (TypeError, ValueError):
        return DEFAULT_NUMBER_FORMAT
    return raw


def configure_logging() -> None:
    """Configure root logging from DIVLISP_LOGLEVEL.

    The library never configures logging itself; a host program embedding the
    interpreter calls this once at startup, before creating an Interpreter.
    """
    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
