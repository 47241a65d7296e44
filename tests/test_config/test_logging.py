"""Testes para gocardless_client.config.logging.

Cobre: configure_logging, get_logger, log_retry,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from gocardless_client.config.logging import (
    FIELD_RENAME_MAP,
    REDACTED,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_retry,
)
from gocardless_client.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from gocardless_client.observability import reset_correlation_id, set_correlation_id


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível é case insensitive."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_default_getter_reads_context_correlation_id(self) -> None:
        """Sem getter, usa o correlation_id do ContextVar do pacote."""
        configure_logging()
        handler = logging.getLogger().handlers[0]
        filter_ = next(f for f in handler.filters if isinstance(f, CorrelationIdFilter))

        token = set_correlation_id("ctx-42")
        try:
            record = _record()
            filter_.filter(record)
        finally:
            reset_correlation_id(token)

        assert record.correlation_id == "ctx-42"

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "gocardless_client"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestLogRetry:
    """Testes para log_retry."""

    def test_log_retry_emits_warning_with_extra(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_retry(logger, "POST", attempt=1, reason="timeout", wait_seconds=0.5)

        logger.warning.assert_called_once()
        call_args = logger.warning.call_args
        assert call_args[0][0] == "http_retry"
        assert call_args[1]["extra"] == {
            "method": "POST",
            "attempt": 1,
            "reason": "timeout",
            "wait_seconds": 0.5,
        }


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""
        assert record.service == "service_name"

    def test_filter_adds_client_version(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.client_version == "1.0.0"

    def test_filter_redacts_sensitive_extra_fields(self) -> None:
        logger = logging.getLogger("test.redaction")
        record = logger.makeRecord(
            "test.redaction",
            logging.INFO,
            "",
            0,
            "msg",
            (),
            None,
            extra={"access_token": "live_secret", "attempt": 1},
        )

        CorrelationIdFilter("svc").filter(record)

        assert record.access_token == REDACTED
        assert record.attempt == 1


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        assert isinstance(REQUIRED_LOG_FIELDS, frozenset)
        expected = {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
            "client_version",
        }
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        formatter = create_json_formatter()
        assert isinstance(formatter, JsonFormatter)

        record = logging.LogRecord(
            name="gocardless_client.http.executor",
            level=logging.WARNING,
            pathname="",
            lineno=0,
            msg="http_retry",
            args=(),
            exc_info=None,
        )
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.attempt = 2

        payload = json.loads(formatter.format(record))
        assert payload["message"] == "http_retry"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "gocardless_client.http.executor"
        assert payload["correlation_id"] == "abc-123"
        assert payload["attempt"] == 2

    def test_json_formatter_keeps_non_ascii(self) -> None:
        formatter = create_json_formatter()
        record = _record("cobrança")
        record.correlation_id = ""
        record.service = "svc"
        record.client_version = "1.0.0"

        assert "cobrança" in formatter.format(record)
