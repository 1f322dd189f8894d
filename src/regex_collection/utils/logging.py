"""Logging utilities.

The package logger ``regex_collection`` carries a :class:`logging.NullHandler`
so that importing the library never emits output on its own.  Applications
(including the bundled CLI) call :func:`configure_logging` to attach a single
stderr handler.  Calling it again replaces that handler rather than stacking a
second one, so configuration is idempotent.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]

PACKAGE_LOGGER = "regex_collection"

_HANDLER_NAME = "regex_collection.stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children.

    ``name`` may be a dotted module path such as ``regex_collection.cli`` or a
    bare suffix such as ``"cli"``.
    """

    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger at ``level``.

    The handler binds to the current ``sys.stderr`` so that streams swapped in
    by test runners are honoured.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
