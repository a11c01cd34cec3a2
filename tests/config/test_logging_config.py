"""Testes para config.logging.

Cobre: install_null_handler, configure_logging no logger do SDK,
InfobipContextFilter e create_json_formatter com os campos de contexto.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from infobip_channels.config.logging import (
    FIELD_RENAME_MAP,
    REDACTED_VALUE,
    REQUIRED_LOG_FIELDS,
    SDK_CONTEXT_FIELDS,
    SDK_LOGGER_NAME,
    VALID_LOG_LEVELS,
    InfobipContextFilter,
    configure_logging,
    create_json_formatter,
    install_null_handler,
)
from infobip_channels.connectors.api_logging import log_api_error


@pytest.fixture(autouse=True)
def restore_sdk_logger() -> Iterator[logging.Logger]:
    """Restaura handlers, nível e propagação do logger do SDK após cada teste."""
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    saved = (list(sdk_logger.handlers), sdk_logger.level, sdk_logger.propagate)
    yield sdk_logger
    sdk_logger.handlers, sdk_logger.level, sdk_logger.propagate = saved[0], saved[1], saved[2]


def _record(msg: str = "msg", level: int = logging.INFO, name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestNullHandler:
    def test_package_import_installs_null_handler(self) -> None:
        import infobip_channels  # noqa: F401

        handlers = logging.getLogger(SDK_LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_install_null_handler_is_idempotent(self, restore_sdk_logger) -> None:
        restore_sdk_logger.handlers = []
        install_null_handler()
        install_null_handler()
        assert len(restore_sdk_logger.handlers) == 1


class TestConfigureLogging:
    def test_configures_sdk_logger_not_root(self, restore_sdk_logger) -> None:
        root_handlers = list(logging.getLogger().handlers)

        handler = configure_logging(level="warning")

        assert restore_sdk_logger.handlers == [handler]
        assert restore_sdk_logger.level == logging.WARNING
        assert restore_sdk_logger.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_calls_replace_handler(self, restore_sdk_logger) -> None:
        configure_logging()
        configure_logging()
        assert len(restore_sdk_logger.handlers) == 1

    def test_propagate_can_be_kept(self, restore_sdk_logger) -> None:
        configure_logging(propagate=True)
        assert restore_sdk_logger.propagate is True

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_installs_context_filter(self) -> None:
        handler = configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        assert any(isinstance(f, InfobipContextFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert SDK_LOGGER_NAME == "infobip_channels"

    def test_api_error_is_emitted_as_json(self) -> None:
        handler = configure_logging(
            level="DEBUG", service_name="svc", correlation_id_getter=lambda: "corr-1"
        )
        stream = io.StringIO()
        handler.setStream(stream)

        log_api_error(401, "POST", "/sms/2/text/advanced", "UNAUTHORIZED")

        output = json.loads(stream.getvalue())
        assert output["level"] == "WARNING"
        assert output["logger"] == "infobip_channels.connectors.api_logging"
        assert output["service"] == "svc"
        assert output["correlation_id"] == "corr-1"
        assert output["method"] == "POST"
        assert output["endpoint"] == "/sms/2/text/advanced"
        assert output["status_code"] == 401
        assert output["violation_count"] is None
        assert output["is_permanent"] is True


class TestInfobipContextFilter:
    def test_adds_service_and_correlation_id(self) -> None:
        filter_ = InfobipContextFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = InfobipContextFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_fills_missing_context_fields(self) -> None:
        record = _record()
        record.endpoint = "/email/3/send"
        InfobipContextFilter("svc").filter(record)

        assert record.correlation_id == ""
        assert record.endpoint == "/email/3/send"
        for field in SDK_CONTEXT_FIELDS:
            assert hasattr(record, field)
        assert record.status_code is None

    def test_redacts_credentials(self) -> None:
        record = _record()
        record.api_key = "secret-key"
        record.password = "hunter2"
        InfobipContextFilter("svc").filter(record)
        assert record.api_key == REDACTED_VALUE
        assert record.password == REDACTED_VALUE


class TestCreateJsonFormatter:
    def test_required_fields_include_sdk_context(self) -> None:
        assert REQUIRED_LOG_FIELDS[:6] == (
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        )
        assert set(SDK_CONTEXT_FIELDS) <= set(REQUIRED_LOG_FIELDS)
        assert {"endpoint", "status_code", "violation_count"} <= set(SDK_CONTEXT_FIELDS)

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_validation_summary(self) -> None:
        record = _record("Payload rejeitado na validação", name="infobip_channels.connectors")
        record.violation_count = 2
        InfobipContextFilter("svc").filter(record)

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "Payload rejeitado na validação"
        assert output["logger"] == "infobip_channels.connectors"
        assert output["violation_count"] == 2
        assert output["endpoint"] is None
