"""
Logging configuration.
Loguru is the only sink; stdlib loggers (uvicorn, sqlalchemy) are routed into it.
"""

import json
import logging
import sys
from typing import Any

from loguru import logger

from buildstore.config import Settings


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def serialize_record(record: dict[str, Any], app_name: str) -> str:
    """Render a loguru record as a single JSON line."""
    subset = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "service": app_name,
        "module": record.get("name"),
        "function": record.get("function"),
        "line": record.get("line"),
    }
    for key, value in record.get("extra", {}).items():
        if not key.startswith("_"):
            subset[key] = value
    if record.get("exception"):
        subset["exception"] = str(record["exception"])
    return json.dumps(subset, default=str)


def configure_logging(settings: Settings) -> None:
    """Configure loguru and intercept stdlib logging."""
    logger.remove()

    if settings.json_logs:
        logger.add(
            lambda msg: print(serialize_record(msg.record, settings.app_name), file=sys.stderr),
            level=settings.log_level,
            backtrace=True,
            diagnose=settings.debug,
        )
    else:
        logger.add(
            sys.stderr,
            level=settings.log_level,
            format="{time} | {level} | {name}:{function} | {message}",
            backtrace=True,
            diagnose=settings.debug,
        )

    logging.getLogger().handlers = [InterceptHandler()]
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "sqlalchemy.engine"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
