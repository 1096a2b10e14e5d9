"""
Logging Setup

Console output always; an optional size-rotated log file when LOG_FILE is set.
"""

import logging
import logging.config
from typing import Any

from hotel_listing.config import Settings, get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chatty at INFO; only their warnings reach the handlers
QUIET_LOGGERS = ("aiosqlite", "sqlalchemy.pool")


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Build the dictConfig for the application

    LOG_LEVEL overrides the level derived from DEBUG. SQL statements are echoed
    only in DEBUG. Uvicorn access lines stay on the console, never in the file.

    Args:
        settings: Application configuration

    Returns:
        dict: Configuration accepted by logging.config.dictConfig
    """
    log_level = settings.LOG_LEVEL or ("DEBUG" if settings.DEBUG else "INFO")

    handlers: dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    }
    app_handlers = ["console"]
    if settings.LOG_FILE:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": settings.LOG_FILE,
            "maxBytes": settings.LOG_FILE_MAX_BYTES,
            "backupCount": settings.LOG_FILE_BACKUP_COUNT,
            "encoding": "utf-8",
            "delay": True,
        }
        app_handlers = ["console", "file"]

    loggers: dict[str, Any] = {
        "root": {
            "handlers": app_handlers,
            "level": log_level,
        },
        "uvicorn": {
            "handlers": app_handlers,
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.access": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "handlers": app_handlers,
            "level": "INFO" if settings.DEBUG else "WARNING",
            "propagate": False,
        },
        "hotel_listing": {
            "handlers": app_handlers,
            "level": log_level,
            "propagate": False,
        },
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging(settings: Settings = None):
    """Apply the logging configuration for the current settings."""
    logging.config.dictConfig(build_logging_config(settings or get_settings()))
