"""Levelled logging to standard error."""

from __future__ import annotations

import sys

from .tags import Verbosity

_verbosity = Verbosity.ERROR


def set_verbosity(level: Verbosity | int) -> None:
    """Set the highest level of message that is written."""
    global _verbosity
    _verbosity = Verbosity(level)


def get_verbosity() -> Verbosity:
    """Return the current verbosity level."""
    return _verbosity


def log(level: Verbosity | int, message: str, *args: object) -> None:
    """Write a printf-style message to standard error if ``level`` is enabled."""
    if int(level) > int(_verbosity):
        return
    text = message % args if args else message
    sys.stderr.write(text)


def log_error(message: str, *args: object) -> None:
    log(Verbosity.ERROR, message, *args)


def log_warning(message: str, *args: object) -> None:
    log(Verbosity.WARNING, message, *args)


def log_info(message: str, *args: object) -> None:
    log(Verbosity.INFO, message, *args)


def log_debug(message: str, *args: object) -> None:
    log(Verbosity.DEBUG, message, *args)