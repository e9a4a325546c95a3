"""Logging setup for the SkyFrames entry points.

The CLI and the Streamlit app call ``configure_logging`` once at start-up.
Library modules only create ``logging.getLogger(__name__)`` loggers, which
all sit under the ``skyframes`` package logger configured here. The root
logger is left to the host (Streamlit, pytest).
"""

import logging
import sys

PACKAGE_LOGGER = "skyframes"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(
    level: int = logging.INFO, log_file: str | None = None
) -> logging.Logger:
    """Send ``skyframes.*`` records at ``level`` and above to stderr.

    Args:
        level: Threshold for the package logger.
        log_file: Also append records to this file when given.

    Returns:
        The configured package logger. Calling again replaces the handlers
        installed by the previous call instead of stacking new ones.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
