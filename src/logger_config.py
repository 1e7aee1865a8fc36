"""Logger configuration for Platform Report.

Every module gets its logger from :func:`get_logger`. Handlers write to
standard error and the default level is WARNING; stdout carries only the
report, and the lookups log below WARNING, so a normal run is silent.
"""

import logging
import sys

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(logger_name: str, level: int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a named logger with a single stderr handler.

    Args:
        logger_name: Usually the calling module's ``__name__``.
        level: Logger level. Defaults to ``logging.WARNING``.

    Returns:
        The configured ``logging.Logger``. Calling again with the same
        name does not add a second handler.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    return logger
