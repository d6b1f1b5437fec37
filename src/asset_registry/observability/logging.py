"""Loguru-based structured logging configuration with trace ID support.

This module wires Loguru up for the registry client: console and file sinks,
pretty or JSON formatting, automatic trace ID injection, and redirection of
standard library `logging` records into Loguru.
"""

import json
import logging
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from types import FrameType
from typing import TYPE_CHECKING, Any

from loguru import logger

from .trace_id import NO_TRACE, get_trace_id

if TYPE_CHECKING:
    from loguru import Logger, Record
else:
    Logger = type(logger)
    Record = dict


class LogFormat(str, Enum):
    """Available log output formats.

    Attributes:
        JSON (str): One JSON object per line, for machine parsing.
        PRETTY (str): Colored, human-readable lines including the trace ID.
        COMPACT (str): A shorter human-readable line.
    """

    JSON = "json"
    PRETTY = "pretty"
    COMPACT = "compact"


def trace_id_patcher(record: Record) -> None:
    """Loguru patcher injecting the active trace ID into every record.

    If the record carries an exception with its own trace ID (a `CoreError`),
    that ID is exposed as `exception_trace_id` as well.
    """
    record["extra"]["trace_id"] = get_trace_id() or NO_TRACE

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_trace_id = getattr(exc_info.value, "trace_id", None)
        if exception_trace_id and exception_trace_id != NO_TRACE:
            record["extra"]["exception_trace_id"] = exception_trace_id


def json_formatter(record: Record) -> str:
    """Formats a Loguru record into a single JSON line."""
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        "message": record["message"],
        "trace_id": record["extra"].get("trace_id", NO_TRACE),
    }

    for key, value in record["extra"].items():
        if key != "trace_id" and not key.startswith("_"):
            log_entry[key] = value

    exc_info = record.get("exception")
    if exc_info and exc_info.value and exc_info.type:
        exception_info: dict[str, Any] = {
            "type": exc_info.type.__name__,
            "value": str(exc_info.value),
        }
        for attr in ("error_code", "details"):
            attr_value = getattr(exc_info.value, attr, None)
            if attr_value is not None:
                exception_info[attr] = attr_value
        log_entry["exception"] = exception_info

    return json.dumps(log_entry, ensure_ascii=False, default=str)


def get_formatter(format_type: LogFormat) -> str | Callable[[Record], str]:
    """Returns a Loguru format string, or a callable for JSON output.

    Args:
        format_type: The desired `LogFormat`.

    Returns:
        A format string suitable for `logger.add`, or a callable producing JSON.
    """
    if format_type == LogFormat.PRETTY:
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<yellow>{extra[trace_id]}</yellow> | "
            "<level>{message}</level>"
        )

    elif format_type == LogFormat.COMPACT:
        return "<green>{time:HH:mm:ss}</green> | <level>{level[0]}</level> | <level>{message}</level>"

    return json_formatter


def _sink_options(format_type: LogFormat) -> dict[str, Any]:
    formatter = get_formatter(format_type)
    if isinstance(formatter, str):
        return {"format": formatter}

    # JSON lines are rendered by the formatter itself and stashed in extra
    def _format(record: Record) -> str:
        record["extra"]["_json"] = formatter(record)
        return "{extra[_json]}\n"

    return {"format": _format}


class InterceptHandler(logging.Handler):
    """Redirects standard library logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    level: str = "INFO",
    enable_console: bool = True,
    enable_file: bool = False,
    log_file: str | Path | None = None,
    app_name: str | None = None,
    environment: str | None = None,
    console_format: LogFormat = LogFormat.PRETTY,
    file_format: LogFormat = LogFormat.JSON,
) -> None:
    """Configures Loguru logging for the application.

    Args:
        level: The minimum logging level to emit.
        enable_console: If `True`, logs go to stdout.
        enable_file: If `True`, logs are also written to `log_file`.
        log_file: Path to the log file. Defaults to `logs/asset_registry.log`.
        app_name: Optional application name added to every record.
        environment: Optional environment name added to every record.
        console_format: `LogFormat` used for the console sink.
        file_format: `LogFormat` used for the file sink.
    """
    logger.remove()

    extra_fields: dict[str, Any] = {}
    if app_name:
        extra_fields["app"] = app_name
    if environment:
        extra_fields["environment"] = environment

    def add_extra_fields(record: Record) -> bool:
        record["extra"].update(extra_fields)
        return True

    if enable_console:
        logger.add(
            sys.stdout,
            level=level,
            colorize=console_format != LogFormat.JSON,
            backtrace=True,
            diagnose=False,
            filter=add_extra_fields,
            **_sink_options(console_format),
        )

    if enable_file:
        log_file = Path("logs/asset_registry.log") if log_file is None else Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            level=level,
            rotation="1 day",
            retention="30 days",
            backtrace=True,
            diagnose=False,
            filter=add_extra_fields,
            **_sink_options(file_format),
        )

    logger.configure(patcher=trace_id_patcher)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(_: str, **kwargs: Any) -> Logger:
    """Returns the Loguru logger, optionally bound to extra fields.

    Args:
        _: Logger name placeholder; Loguru uses a single global logger.
        **kwargs: Extra fields bound to every record from the returned logger.
    """
    if kwargs:
        return logger.bind(**kwargs)

    return logger
