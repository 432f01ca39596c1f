"""Logging configuration for applications embedding the engine.

The library never configures logging on import; call
:func:`configure_logging` from the host application if it does not set up
logging itself.
"""

from __future__ import annotations

import logging.config
import os
from typing import Any, Dict

LOG_LEVEL_ENV_VAR = "RELEVANTWORDS_LOG_LEVEL"


def build_logging_config(level: str | None = None) -> Dict[str, Any]:
    log_level = (level or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "brief": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "brief",
            },
        },
        "loggers": {
            "relevantwords": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": False,
            },
        },
    }


LOGGING = build_logging_config()


def configure_logging(level: str | None = None) -> None:
    """Apply the console logging configuration for the ``relevantwords`` logger."""

    logging.config.dictConfig(build_logging_config(level) if level else LOGGING)
