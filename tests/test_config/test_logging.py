"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
SensitiveDataFilter e create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SensitiveDataFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    mask_sensitive,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", args: tuple[object, ...] = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_context_and_masking_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")

        [handler] = logging.getLogger().handlers

        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, SensitiveDataFilter) for f in handler.filters)

    def test_http_libraries_are_quieted(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "split_pagarme"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        logger = get_logger("same.module")
        assert logger is get_logger("same.module")
        assert logger.name == "same.module"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        """Filter preserva correlation_id passado via extra."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name").filter(record)
        assert record.correlation_id == ""


class TestSensitiveDataFilter:
    """Mascaramento de chaves secretas e números de cartão."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("chave sk_test_abc123 inválida", "chave *** inválida"),
            ("cartão 4000000000000010 recusado", "cartão *** recusado"),
            ("pedido 12345 criado", "pedido 12345 criado"),
            ("filial brauna", "filial brauna"),
        ],
    )
    def test_mask_sensitive(self, text: str, expected: str) -> None:
        assert mask_sensitive(text) == expected

    def test_filter_masks_interpolated_args(self) -> None:
        record = _record("Authorization falhou para %s", ("sk_live9f8e7d",))

        assert SensitiveDataFilter().filter(record) is True

        assert record.getMessage() == "Authorization falhou para ***"
        assert record.args is None

    def test_filter_keeps_clean_record_untouched(self) -> None:
        record = _record("order_created %s", ("or_123",))
        SensitiveDataFilter().filter(record)
        assert record.args == ("or_123",)


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """JsonFormatter renomeia campos e inclui extras."""
        formatter = create_json_formatter()
        record = _record("order_created")
        record.name = "app.use_cases.pagarme"
        record.correlation_id = "abc-123"
        record.service = "split_pagarme"
        record.filial_id = "brauna"

        output = json.loads(formatter.format(record))

        assert output["message"] == "order_created"
        assert output["level"] == "INFO"
        assert output["logger"] == "app.use_cases.pagarme"
        assert output["correlation_id"] == "abc-123"
        assert output["filial_id"] == "brauna"
