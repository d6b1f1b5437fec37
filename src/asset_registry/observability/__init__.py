"""Observability package for asset_registry."""

from .logging import LogFormat, get_logger, setup_logging
from .metrics import PrometheusMetricsRegistry
from .trace_id import (
    TraceContext,
    clear_trace_id,
    generate_trace_id,
    get_formatted_trace_id,
    get_or_create_trace_id,
    get_trace_id,
    set_trace_id,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LogFormat",
    "PrometheusMetricsRegistry",
    "generate_trace_id",
    "set_trace_id",
    "get_trace_id",
    "get_or_create_trace_id",
    "get_formatted_trace_id",
    "clear_trace_id",
    "TraceContext",
]
