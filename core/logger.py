"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.

Features:
- Structured logging with Loguru
- Standard library logging interception (routes stdlib logging to Loguru)
- Third-party library logger configuration (redis)
- Script logging helper for the CLI
- JSON logging format option

Log output goes to stderr; stdout is reserved for the demo's result lines.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger  # type: ignore

from core.constants import VALID_LOG_LEVELS

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
SCRIPT_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"

LOG_DIR = Path("logs")


# =============================================================================
# Standard Library Logging Interception
# =============================================================================


class InterceptHandler(logging.Handler):
    """
    Intercept standard library logging and route to Loguru.

    redis-py logs through stdlib logging; this keeps its output
    formatted the same way as ours.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where logging call originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging() -> None:
    """Route Python standard library logging to Loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def configure_third_party_loggers() -> None:
    """Quiet third-party library loggers."""
    logging.getLogger("redis").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def _normalize_level(level: Optional[str]) -> str:
    level = (level or "INFO").upper()
    if level not in VALID_LOG_LEVELS:
        return "INFO"
    return level


# =============================================================================
# JSON Logging Format
# =============================================================================


def serialize_log_record(record: dict) -> str:
    """
    Serialize log record to a flat JSON dictionary.

    Args:
        record: Loguru record dictionary

    Returns:
        JSON string representation of the log record, escaped for Loguru's format()
    """
    log_record = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("exception"):
        exception = record["exception"]
        log_record["exception"] = {
            "type": exception.type.__name__ if exception.type else "Unknown",
            "message": str(exception.value),
        }

    # Context bound via logger.bind()
    if record.get("extra"):
        for key, value in record["extra"].items():
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, OverflowError):
                log_record[key] = str(value)

    # Loguru calls format() on the result and parses color tags
    return (
        json.dumps(log_record).replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        + "\n"
    )


def _add_file_sinks(json_format: bool) -> None:
    LOG_DIR.mkdir(exist_ok=True)
    suffix = ".json.log" if json_format else ".log"
    file_format = serialize_log_record if json_format else FILE_FORMAT

    logger.add(
        LOG_DIR / f"app{suffix}",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format=file_format,
        level="DEBUG",
        colorize=False,
    )
    logger.add(
        LOG_DIR / f"error{suffix}",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format=file_format,
        level="ERROR",
        colorize=False,
    )


# =============================================================================
# Setup
# =============================================================================


def configure_script_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure logging for the command-line runner.

    Console output only (no file logging).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, output logs in JSON format

    Example:
        from core.logger import logger, configure_script_logging

        configure_script_logging(level="DEBUG")
        logger.info("Script started")
    """
    logger.remove()
    level = _normalize_level(level)

    if json_format:
        logger.add(sys.stderr, format=serialize_log_record, level=level, colorize=False)
    else:
        logger.add(sys.stderr, colorize=True, format=SCRIPT_FORMAT, level=level)

    intercept_standard_logging()
    configure_third_party_loggers()


def setup_logger() -> None:
    """
    Configure logger handlers from settings.

    Only configures once even if called multiple times.
    """
    from .config import get_settings

    settings = get_settings()
    log_level = _normalize_level(settings.log_level)
    json_format = settings.log_format.lower() == "json"

    # Already configured by a previous call
    if getattr(setup_logger, "_configured", False):
        return

    logger.remove()
    if json_format:
        logger.add(sys.stderr, format=serialize_log_record, level=log_level, colorize=False)
    else:
        logger.add(sys.stderr, colorize=True, format=CONSOLE_FORMAT, level=log_level)

    if settings.log_file_enabled:
        _add_file_sinks(json_format)

    intercept_standard_logging()
    configure_third_party_loggers()
    setup_logger._configured = True


def format_exception_short(exception: Exception, context: Optional[str] = None) -> str:
    """
    Format exception to be short and readable.

    Example:
        >>> print(format_exception_short(KeyError("x"), "GET"))
        GET | KeyError: 'x'
    """
    parts = []
    if context:
        parts.append(context)
    parts.append(f"{type(exception).__name__}: {exception}")

    tb = exception.__traceback__
    if tb:
        while tb.tb_next:
            tb = tb.tb_next
        filename = Path(tb.tb_frame.f_code.co_filename).name
        parts.append(f"({filename}:{tb.tb_lineno})")

    return " | ".join(parts)


# Configure logger on module import
setup_logger()

__all__ = [
    "logger",
    "format_exception_short",
    "configure_script_logging",
    "configure_third_party_loggers",
    "intercept_standard_logging",
    "serialize_log_record",
    "setup_logger",
    "InterceptHandler",
]
