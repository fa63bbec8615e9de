"""Testes para config.logging.

Cobre: configure_logging, CorrelationIdFilter, create_json_formatter e
mask_key.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    mask_key,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "lead_committed", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="app.services.idempotency_gateway",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning", "ERROR"])
    def test_sets_root_level(self, level: str) -> None:
        """Nível é aplicado ao root (case insensitive)."""
        configure_logging(level=level)

        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers_and_installs_filter(self) -> None:
        """Um único handler com CorrelationIdFilter."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_quiets_http_client_loggers(self) -> None:
        """httpx não polui logs em DEBUG."""
        configure_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_constants(self) -> None:
        assert "INFO" in VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "lead_intake"

    def test_get_logger_returns_named_logger(self) -> None:
        assert get_logger("app.bootstrap") is logging.getLogger("app.bootstrap")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_injects_service_and_correlation_id(self) -> None:
        """Correlation id vem do getter."""
        record = _record()

        assert CorrelationIdFilter("lead_intake", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "lead_intake"

    def test_keeps_explicit_correlation_id(self) -> None:
        """Valor passado via extra prevalece."""
        record = _record()
        record.correlation_id = "explicit"

        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)

        assert record.correlation_id == "explicit"

    def test_empty_without_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestJsonFormatter:
    """Testes para create_json_formatter."""

    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_output_is_json_with_renamed_fields(self) -> None:
        """level/logger renomeados e extras preservados."""
        record = _record()
        record.correlation_id = "abc-123"
        record.service = "lead_intake"
        record.lead_id = "6f1c2b3a..."

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "lead_committed"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.services.idempotency_gateway"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "lead_intake"
        assert payload["lead_id"] == "6f1c2b3a..."


class TestMaskKey:
    """Testes para mask_key."""

    def test_masks_long_values(self) -> None:
        assert mask_key("6f1c2b3a-4d5e-4f60-8a7b-9c0d1e2f3a4b") == "6f1c2b3a..."

    def test_short_and_empty_values(self) -> None:
        assert mask_key("abc") == "abc"
        assert mask_key(None) == ""
        assert mask_key("") == ""
