"""Modelos de requisição e resposta por canal.

Os contratos de cada canal ficam em módulos próprios (sms, whatsapp, email);
common concentra bases e tipos compartilhados.
"""

from infobip_channels.models.common import (
    ApiErrorDetails,
    ApiResponse,
    ResponseModel,
    ServiceException,
    Status,
    WireModel,
)

__all__ = [
    "ApiErrorDetails",
    "ApiResponse",
    "ResponseModel",
    "ServiceException",
    "Status",
    "WireModel",
]
