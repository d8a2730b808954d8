"""Structured JSON logging configuration."""

import logging
import sys

from pythonjsonlogger import jsonlogger

from app.core.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding level, logger and service fields."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["service"] = "schoolfit-api"

        if hasattr(record, "request_id"):
            log_record["request_id"] = record.request_id


def setup_logging() -> None:
    """Configure the root logger once.  Safe to call repeatedly."""
    root_logger = logging.getLogger()
    if getattr(root_logger, "_schoolfit_configured", False):
        return

    handler = logging.StreamHandler(sys.stdout)

    if settings.LOG_FORMAT == "json":
        formatter = CustomJsonFormatter(fmt="%(asctime)s %(level)s %(name)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter(fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                                      datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root_logger.addHandler(handler)
    root_logger._schoolfit_configured = True

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger (usually ``get_logger(__name__)``)."""
    return logging.getLogger(name)
