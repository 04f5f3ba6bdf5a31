"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import io
import json

import pytest

from pythaccounts.core.decoders import parse_mapping_data
from pythaccounts.core.exceptions import BadMagicError
from pythaccounts.core.logging import LogConfig, StructuredLogger, configure_logging, logger


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    stream.seek(0)
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def test_structured_log_contains_trace_and_context() -> None:
    buffer = io.StringIO()
    config = LogConfig(console_stream=buffer, console_output=True, file_output=False)
    logger = StructuredLogger(config)

    with logger.context(trace_id="trace-123", account_type="price", error_code="TOO_SHORT", request_id="req-42"):
        logger.logger.info("decode failed", offset=176)

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["trace_id"] == "trace-123"
    assert record["account_type"] == "price"
    assert record["error_code"] == "TOO_SHORT"
    assert record["context"]["request_id"] == "req-42"
    assert record["context"]["offset"] == 176


def test_trace_id_propagates_within_context() -> None:
    buffer = io.StringIO()
    logger = StructuredLogger(LogConfig(console_stream=buffer, console_output=True, file_output=False))

    with logger.context() as trace_id:
        logger.logger.info("first event")
        logger.logger.info("second event")

    logger.logger.info("outside context")

    records = _read_records(buffer)
    assert len(records) == 3
    assert records[0]["trace_id"] == records[1]["trace_id"]
    assert records[0]["trace_id"] == trace_id
    assert records[2]["trace_id"] != records[0]["trace_id"]


def test_trace_id_generated_when_missing() -> None:
    buffer = io.StringIO()
    logger = StructuredLogger(LogConfig(console_stream=buffer, console_output=True, file_output=False))

    logger.logger.info("single message")

    records = _read_records(buffer)
    assert len(records) == 1
    trace_id = records[0]["trace_id"]
    assert isinstance(trace_id, str)
    assert len(trace_id) == 32
    assert all(character in "0123456789abcdef" for character in trace_id)


def test_decoders_log_success_at_debug(account_bytes) -> None:
    buffer = io.StringIO()
    logger = StructuredLogger(LogConfig(console_stream=buffer, level="DEBUG"))

    with logger.context(trace_id="caller-trace"):
        parse_mapping_data(account_bytes.mapping([account_bytes.key(1)]))

    records = _read_records(buffer)
    assert len(records) == 1
    assert records[0]["level"] == "DEBUG"
    assert records[0]["account_type"] == "mapping"
    assert records[0]["trace_id"] == "caller-trace"
    assert records[0]["context"]["length"] == 56 + 32


def test_decoders_log_failures_with_error_code(account_bytes) -> None:
    buffer = io.StringIO()
    StructuredLogger(LogConfig(console_stream=buffer, level="DEBUG"))

    with pytest.raises(BadMagicError):
        parse_mapping_data(account_bytes.mapping([], magic=7))

    records = _read_records(buffer)
    assert len(records) == 1
    assert records[0]["error_code"] == "BAD_MAGIC"
    assert records[0]["context"]["offset"] == 0


def test_file_output_writes_json_lines(tmp_path) -> None:
    path = tmp_path / "logs" / "decode.jsonl"
    logger = StructuredLogger(LogConfig(console_output=False, file_output=True, file_path=str(path)))

    logger.logger.warning("written to file")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["message"] == "written to file"


def test_configure_logging_replaces_existing_sinks() -> None:
    captured: list[str] = []
    logger.add(captured.append, level="DEBUG")
    buffer = io.StringIO()

    configure_logging("INFO", console_stream=buffer)
    logger.info("after reconfigure")

    assert captured == []
    assert _read_records(buffer)[0]["message"] == "after reconfigure"
