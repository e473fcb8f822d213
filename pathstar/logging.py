"""Package-wide logging for pathstar.

Every module asks for its logger with `get_logger(__name__)`, which hangs it
under the `pathstar` root logger. Only the root carries a handler, so the
command line (or a library user) changes verbosity in one place.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathstar"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single pathstar handler to the root logger.

    Only the first call has an effect; `reset_logging()` re-arms it.

    Args:
        level: Initial level of the root logger.
        format_string: Record format, `DEFAULT_FORMAT` when omitted.
        handler: Destination for records, stdout when omitted.
    """
    global _root_configured
    if _root_configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(level)

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog listens on the stdlib root logger
    root.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for `name` whose level follows the pathstar root."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the pathstar root logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show search and parse diagnostics; used by ``pathstar --verbose``."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the pathstar handler so the next call configures it afresh."""
    global _root_configured
    _root_configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
