"""Package-wide logging for wgraph.

Every module logs through ``get_logger(__name__)``, which hangs it below the
``wgraph`` logger. That logger owns the single stderr handler, so the CLI can
raise or lower verbosity for the whole package with one call while stdout
stays reserved for command output.
"""

import logging
import sys

_ROOT_LOGGER_NAME = "wgraph"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(level: int = logging.INFO) -> None:
    """Attach the stderr handler to the ``wgraph`` logger once.

    Later calls do nothing until :func:`reset_logging` runs. Records still
    propagate to the Python root logger, so pytest's ``caplog`` sees them.

    Args:
        level: Initial level of the ``wgraph`` logger.
    """
    global _configured

    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger whose level follows the ``wgraph`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of every wgraph logger and of the stderr handler.

    Args:
        level: Logging level, e.g. ``logging.DEBUG`` for ``--verbose``.
    """
    setup_root_logger()
    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the handler and level so the next call configures afresh."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
