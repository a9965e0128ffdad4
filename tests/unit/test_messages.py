"""
Unit tests for message sinks and logging setup.
"""

import json
import logging

from card_autonumber.core.models import OutputMessage
from card_autonumber.observability import (
    CollectingMessageSink,
    LoggingMessageSink,
    get_logger,
    log_operation,
    setup_logger,
)


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def capturing_logger(name: str) -> tuple[logging.Logger, ListHandler]:
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = ListHandler()
    logger.addHandler(handler)
    return logger, handler


class TestCollectingMessageSink:
    """Tests for the in-memory sink"""

    def test_keeps_messages_in_order(self):
        sink = CollectingMessageSink()
        sink.report(OutputMessage.parsing_error("first"))
        sink.report(OutputMessage(kind="info", text="second"))

        assert [m.text for m in sink.messages] == ["first", "second"]
        assert [m.text for m in sink.of_kind("parsing_error")] == ["first"]


class TestLoggingMessageSink:
    """Tests for the logger-backed sink"""

    def test_logs_parsing_errors_at_error_level(self):
        logger, handler = capturing_logger("test-sink-errors")
        sink = LoggingMessageSink(logger=logger)

        sink.report(OutputMessage.parsing_error("bad card", source="deck.typ", offset=3))

        assert len(handler.records) == 1
        record = handler.records[0]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "deck.typ@3: bad card"
        assert record.kind == "parsing_error"
        assert sink.error_count == 1

    def test_counts_by_kind(self):
        logger, handler = capturing_logger("test-sink-counts")
        sink = LoggingMessageSink(logger=logger)

        sink.report(OutputMessage(kind="warning", text="w"))
        sink.report(OutputMessage(kind="info", text="i"))

        assert sink.error_count == 0
        assert sink.counts["warning"] == 1
        assert [r.levelno for r in handler.records] == [logging.WARNING, logging.INFO]


class TestLogger:
    """Tests for logger configuration"""

    def test_json_format(self, capsys):
        logger = setup_logger("test-json-logger", level="INFO", format_type="json")
        logger.info("hello", extra={"deck": "Math"})

        err = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(err)
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["deck"] == "Math"

    def test_logs_go_to_stderr_not_stdout(self, capsys):
        logger = setup_logger("test-stderr-logger", level="INFO", format_type="text")
        logger.warning("careful")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "careful" in captured.err

    def test_module_loggers_live_under_application_logger(self):
        assert get_logger("card_autonumber.numbering").name == "card-autonumber.card_autonumber.numbering"
        assert get_logger().name == "card-autonumber"

    def test_log_operation_reports_failure(self):
        logger, handler = capturing_logger("test-operation")

        try:
            with log_operation("Numbering cards", logger=logger, source="deck.typ"):
                raise ValueError("boom")
        except ValueError:
            pass

        assert [r.getMessage() for r in handler.records] == ["Starting: Numbering cards", "Failed: Numbering cards"]
        assert handler.records[-1].error_type == "ValueError"
