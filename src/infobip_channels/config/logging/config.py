"""Configuração de logging do SDK.

Os módulos do SDK logam via ``logging.getLogger(__name__)``, todos abaixo
do logger ``infobip_channels``. Por padrão esse logger só tem um
NullHandler; quem quiser JSON estruturado chama ``configure_logging``.

Nunca logar API key, números de destino ou corpo de mensagens.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from infobip_channels.config.logging.filters import InfobipContextFilter
from infobip_channels.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

SDK_LOGGER_NAME = "infobip_channels"


def install_null_handler() -> None:
    """Garante um NullHandler no logger do SDK (idempotente)."""
    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in sdk_logger.handlers):
        sdk_logger.addHandler(logging.NullHandler())


def configure_logging(
    level: str = "INFO",
    service_name: str = SDK_LOGGER_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    propagate: bool = False,
) -> logging.Handler:
    """Instala handler JSON no logger ``infobip_channels``.

    Chamadas repetidas substituem o handler anterior. O root logger da
    aplicação não é tocado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que retorna o correlation_id do contexto.
        propagate: Se os records também sobem para os handlers do root.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(InfobipContextFilter(service_name, correlation_id_getter))

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(level_upper)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = propagate
    return handler
