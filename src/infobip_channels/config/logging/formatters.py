"""Formatter JSON para os logs do SDK.

Todo record sai com os campos de REQUIRED_LOG_FIELDS, renomeados
conforme FIELD_RENAME_MAP. Os campos de contexto HTTP e de validação
aparecem sempre, com ``null`` quando o record não os carrega.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Contexto emitido pelos helpers de connectors.api_logging e validação
SDK_CONTEXT_FIELDS: tuple[str, ...] = (
    "method",
    "endpoint",
    "status_code",
    "violation_count",
)

# Ordem fixa para saída determinística
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    *SDK_CONTEXT_FIELDS,
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON dos logs do SDK.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "WARNING",
            "logger": "infobip_channels.connectors.api_logging",
            "message": "Erro da API Infobip",
            "correlation_id": "abc-123",
            "service": "infobip_channels",
            "method": "POST",
            "endpoint": "/sms/2/text/advanced",
            "status_code": 401,
            "violation_count": null,
            "is_permanent": true
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
