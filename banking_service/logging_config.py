"""
Logging configuration.

Every module logs through logging.getLogger(__name__), so all
application loggers live under the "banking_service" hierarchy.
setup_logging() attaches one handler to the root of that
hierarchy and is called once at startup.
"""

import logging

LOGGER_NAME = "banking_service"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the application logger.

    Calling this more than once replaces the existing handler
    instead of stacking duplicates.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    return logger
