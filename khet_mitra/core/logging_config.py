"""
Logging configuration for the Khet-Mitra API.

Modules log through ``logging.getLogger(__name__)``; this module only sets up
the root handler once at application startup.
"""

import logging
import logging.config

from khet_mitra.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO.
QUIET_LOGGERS = ("httpx", "httpcore", "azure", "pymongo")


def setup_logging(level: str | None = None) -> None:
    log_level = (level or settings.LOG_LEVEL).upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"level": log_level, "handlers": ["console"]},
            "loggers": {
                name: {"level": "WARNING"} for name in QUIET_LOGGERS
            },
        }
    )
