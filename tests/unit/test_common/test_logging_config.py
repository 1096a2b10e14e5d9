"""
Logging configuration tests
"""

import logging
import logging.config

from hotel_listing.config import Settings
from hotel_listing.logging_config import QUIET_LOGGERS, build_logging_config


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_console_only_by_default():
    config = build_logging_config(_settings())

    assert list(config["handlers"]) == ["console"]
    assert config["loggers"]["hotel_listing"]["level"] == "INFO"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"


def test_debug_echoes_sql():
    config = build_logging_config(_settings(DEBUG=True))

    assert config["loggers"]["hotel_listing"]["level"] == "DEBUG"
    assert config["loggers"]["sqlalchemy.engine"]["level"] == "INFO"


def test_log_level_overrides_debug():
    config = build_logging_config(_settings(DEBUG=True, LOG_LEVEL="WARNING"))

    assert config["loggers"]["root"]["level"] == "WARNING"
    assert config["loggers"]["hotel_listing"]["level"] == "WARNING"


def test_log_file_adds_rotating_handler(tmp_path):
    log_file = tmp_path / "api.log"
    config = build_logging_config(
        _settings(LOG_FILE=str(log_file), LOG_FILE_MAX_BYTES=1024, LOG_FILE_BACKUP_COUNT=2)
    )

    file_handler = config["handlers"]["file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert (file_handler["maxBytes"], file_handler["backupCount"]) == (1024, 2)
    assert config["loggers"]["hotel_listing"]["handlers"] == ["console", "file"]
    # Access lines stay off the file
    assert config["loggers"]["uvicorn.access"]["handlers"] == ["console"]


def test_quiet_loggers_applied(tmp_path):
    logging.config.dictConfig(build_logging_config(_settings(LOG_FILE=str(tmp_path / "api.log"))))
    try:
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

        logging.getLogger("hotel_listing.tests").info("written to file")
        for handler in logging.getLogger("hotel_listing").handlers:
            handler.flush()
        assert "written to file" in (tmp_path / "api.log").read_text(encoding="utf-8")
    finally:
        for name in ("", "uvicorn", "uvicorn.access", "sqlalchemy.engine", "hotel_listing"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            if name:
                logger.propagate = True
                logger.setLevel(logging.NOTSET)
