"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from typing import Any

import structlog

from datadog_util.observability.logging import JsonLoggerFactory, get_logger, log_optional, mask_api_keys
from datadog_util.testing.fakes import RecordingLogger


class TestLogOptional:
    def test_none_sink_is_silent(self) -> None:
        log_optional(None, "error", "ignored")

    def test_calls_matching_level(self) -> None:
        sink = RecordingLogger()
        log_optional(sink, "debug", "hello")
        log_optional(sink, "error", "boom")
        assert sink.records == [("debug", "hello"), ("error", "boom")]

    def test_missing_level_is_skipped(self) -> None:
        class OnlyError:
            def __init__(self) -> None:
                self.seen: list[str] = []

            def error(self, event: str) -> None:
                self.seen.append(event)

        sink = OnlyError()
        log_optional(sink, "debug", "skipped")
        log_optional(sink, "error", "kept")
        assert sink.seen == ["kept"]

    def test_passes_keywords(self) -> None:
        seen: list[dict[str, Any]] = []

        class Sink:
            def debug(self, event: str, **kw: Any) -> None:
                seen.append({"event": event, **kw})

        log_optional(Sink(), "debug", "tick", count=3)
        assert seen == [{"event": "tick", "count": 3}]

    def test_stdlib_logger_is_a_sink(self, caplog: Any) -> None:
        caplog.set_level(logging.DEBUG, logger="datadog_util.sink")
        log_optional(logging.getLogger("datadog_util.sink"), "error", "boom")
        assert [r.getMessage() for r in caplog.records] == ["boom"]


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as captured:
            get_logger("datadog_util.test", component="reporter").info("hello")
        assert captured == [{"event": "hello", "log_level": "info", "component": "reporter"}]


class TestJsonLoggerFactory:
    def teardown_method(self) -> None:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_configures_root_handler(self) -> None:
        handler = JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert root.handlers == [handler]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_structlog_event_is_one_json_line_with_key_masked(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.INFO, stream=stream)
        structlog.get_logger("datadog_util.demo").info(
            "metrics.submitted", status=202, headers={"DD-API-KEY": "secret"}
        )
        line = json.loads(stream.getvalue())
        assert line["event"] == "metrics.submitted"
        assert line["level"] == "info"
        assert line["logger"] == "datadog_util.demo"
        assert line["status"] == 202
        assert line["headers"] == {"DD-API-KEY": "***"}
        assert "secret" not in stream.getvalue()

    def test_stdlib_records_share_the_format(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.INFO, stream=stream)
        logging.getLogger("datadog_util.kernel").warning("listener failed")
        line = json.loads(stream.getvalue())
        assert line["event"] == "listener failed"
        assert line["level"] == "warning"
        assert line["logger"] == "datadog_util.kernel"

    def test_http_client_loggers_quieted_at_info(self) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_client_loggers_follow_debug(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        assert logging.getLogger("httpx").level == logging.DEBUG


class TestMaskApiKeys:
    def test_masks_top_level_and_nested(self) -> None:
        event = {"event": "x", "api_key": "k", "headers": {"dd-api-key": "k", "Accept": "*/*"}}
        assert mask_api_keys(None, "info", event) == {
            "event": "x",
            "api_key": "***",
            "headers": {"dd-api-key": "***", "Accept": "*/*"},
        }
