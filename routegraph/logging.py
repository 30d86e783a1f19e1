"""Package-wide logging for routegraph.

Modules call ``get_logger(__name__)`` and write to children of the
``routegraph`` logger. The graph algorithms emit DEBUG traces only (vertex
merges, cut sizes, searches that found no path), so a default INFO setup
prints nothing while a game engine runs its queries. Wrap a block in
``debug_trace()`` to watch those traces without changing the global level
for good.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "routegraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Give the ``routegraph`` logger its handler; later calls are no-ops.

    Args:
        level: Package level (default: INFO).
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination, a stderr stream by default so query traces do
            not mix with program output.
    """
    global _root_configured

    if _root_configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    package_logger.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name``, following the package level."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_level(level: int) -> None:
    """Change the level of the ``routegraph`` logger and of its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


@contextmanager
def debug_trace() -> Iterator[logging.Logger]:
    """Show algorithm traces inside the ``with`` block, then restore the level.

    Yields:
        The ``routegraph`` package logger.
    """
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    previous = package_logger.level
    set_level(logging.DEBUG)
    try:
        yield package_logger
    finally:
        set_level(previous)


def reset_logging() -> None:
    """Forget the handler so the next ``get_logger`` configures again (tests)."""
    global _root_configured
    _root_configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
