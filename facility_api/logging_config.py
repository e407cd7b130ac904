"""
Logging setup for the Facility Access API.

Modules log through ``logging.getLogger(__name__)``, which places every logger
under the ``facility_api`` namespace. ``setup_logging`` attaches one console
handler to that namespace logger and is safe to call more than once (the app
lifespan calls it on every startup, and tests start the app many times).
"""

import logging

from facility_api.config import settings

LOGGER_NAME = "facility_api"


def setup_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)

    return logger
