"""Tests for Loguru logging configuration."""

import json
import logging
from collections.abc import Generator
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from asset_registry.exceptions import AssetRegistrationError
from asset_registry.observability.logging import (
    LogFormat,
    get_formatter,
    get_logger,
    setup_logging,
    trace_id_patcher,
)
from asset_registry.observability.trace_id import TraceContext


@pytest.fixture(autouse=True)
def reset_loguru_handlers() -> Generator[None, None, None]:
    """Ensures Loguru handlers and patchers are reset around each test."""
    logger.remove()
    yield
    logger.remove()
    logger.configure(patcher=None)
    logging.basicConfig(handlers=[], force=True)


def json_lines(text: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


@pytest.mark.unit
class TestTraceIdPatcher:
    """Test cases for trace_id_patcher."""

    def test_injects_no_trace_by_default(self) -> None:
        record: dict[str, Any] = {"extra": {}, "exception": None}

        trace_id_patcher(record)  # type: ignore[arg-type]

        assert record["extra"]["trace_id"] == "no-trace"

    def test_injects_active_trace_id(self) -> None:
        record: dict[str, Any] = {"extra": {}, "exception": None}

        with TraceContext("trace-123"):
            trace_id_patcher(record)  # type: ignore[arg-type]

        assert record["extra"]["trace_id"] == "trace-123"


@pytest.mark.unit
class TestFormatters:
    """Test cases for get_formatter."""

    def test_pretty_includes_trace_id(self) -> None:
        formatter = get_formatter(LogFormat.PRETTY)

        assert isinstance(formatter, str)
        assert "{extra[trace_id]}" in formatter

    def test_compact_is_string(self) -> None:
        assert isinstance(get_formatter(LogFormat.COMPACT), str)

    def test_json_is_callable(self) -> None:
        assert callable(get_formatter(LogFormat.JSON))


@pytest.mark.unit
class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_json_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "registry.log"
        setup_logging(
            level="DEBUG",
            enable_console=False,
            enable_file=True,
            log_file=log_file,
            app_name="asset-registry",
            environment="development",
        )

        with TraceContext("trace-file"):
            get_logger(__name__, asset_id="ASSET-1").info("Fetched asset")
        logger.complete()

        entries = json_lines(log_file.read_text(encoding="utf-8"))
        assert len(entries) == 1
        entry = entries[0]
        assert entry["message"] == "Fetched asset"
        assert entry["level"] == "INFO"
        assert entry["trace_id"] == "trace-file"
        assert entry["asset_id"] == "ASSET-1"
        assert entry["app"] == "asset-registry"
        assert entry["environment"] == "development"

    def test_json_output_includes_core_error(self, tmp_path: Path) -> None:
        log_file = tmp_path / "errors.log"
        setup_logging(enable_console=False, enable_file=True, log_file=log_file)

        try:
            raise AssetRegistrationError("Failed to register asset", error_value=101)
        except AssetRegistrationError:
            logger.exception("Registration failed")
        logger.complete()

        entry = json_lines(log_file.read_text(encoding="utf-8"))[0]
        assert entry["exception"]["type"] == "AssetRegistrationError"
        assert entry["exception"]["error_code"] == "AssetRegistrationError"
        assert entry["exception"]["details"]["error_value"] == 101

    def test_level_filtering(self, tmp_path: Path) -> None:
        log_file = tmp_path / "warn.log"
        setup_logging(level="WARNING", enable_console=False, enable_file=True, log_file=log_file)

        logger.info("hidden")
        logger.warning("shown")
        logger.complete()

        messages = [entry["message"] for entry in json_lines(log_file.read_text(encoding="utf-8"))]
        assert messages == ["shown"]

    def test_stdlib_logging_is_intercepted(self) -> None:
        stream = StringIO()
        setup_logging(enable_console=False)
        logger.add(stream, format="{level}|{message}", level="DEBUG")

        logging.getLogger("some.library").warning("from stdlib")

        assert "WARNING|from stdlib" in stream.getvalue()


@pytest.mark.unit
class TestGetLogger:
    """Test cases for get_logger."""

    def test_returns_global_logger_without_fields(self) -> None:
        assert get_logger(__name__) is logger

    def test_binds_extra_fields(self) -> None:
        stream = StringIO()
        logger.add(stream, format="{extra[contract]}|{message}")

        get_logger(__name__, contract="asset-registration").info("bound")

        assert stream.getvalue().strip() == "asset-registration|bound"
