"""Helpers de logging para a API Infobip (sem PII).

Nunca loga API key, números de telefone, endereços nem corpo de mensagem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from infobip_channels.connectors.api_errors import is_permanent_error

if TYPE_CHECKING:
    from infobip_channels.validators import ValidationResult

logger = logging.getLogger(__name__)


def log_api_error(
    status_code: int,
    method: str,
    endpoint: str,
    message_id: str | None = None,
) -> None:
    """Loga resposta não-2xx sem expor dados sensíveis."""
    logger.warning(
        "Erro da API Infobip",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "error_message_id": message_id,
            "is_permanent": is_permanent_error(status_code),
        },
    )


def log_request(method: str, endpoint: str) -> None:
    logger.debug("Enviando requisição", extra={"method": method, "endpoint": endpoint})


def log_success(
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Requisição Infobip bem-sucedida",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )


def log_validation_failure(entity: str, result: ValidationResult) -> None:
    """Resumo da validação rejeitada: contagem e caminhos, sem valores."""
    logger.info(
        "Payload rejeitado na validação",
        extra={
            "entity": entity,
            "violation_count": len(result.violations),
            "violation_fields": list(result.fields),
        },
    )
