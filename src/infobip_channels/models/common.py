"""Tipos compartilhados entre canais.

Os nomes serializados (camelCase) são contrato externo da API Infobip:
o alias_generator garante a grafia exata, campo a campo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base para modelos de requisição.

    Imutável e sem restrições de conteúdo: estados inválidos são
    representáveis e só o motor de validação decide se o payload é aceitável.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )


class ResponseModel(BaseModel):
    """Base para modelos de resposta; ignora campos desconhecidos."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class Status(ResponseModel):
    """Status de entrega/envio comum a SMS, WhatsApp e Email."""

    group_id: int | None = None
    group_name: str | None = None
    id: int | None = None
    name: str | None = None
    description: str | None = None
    action: str | None = None


class Price(ResponseModel):
    price_per_message: float | None = None
    currency: str | None = None


class ReportError(ResponseModel):
    """Erro associado a um relatório de entrega."""

    group_id: int | None = None
    group_name: str | None = None
    id: int | None = None
    name: str | None = None
    description: str | None = None
    permanent: bool | None = None


class ServiceException(ResponseModel):
    message_id: str | None = None
    text: str | None = None
    validation_errors: dict[str, list[str]] | None = None


class RequestError(ResponseModel):
    service_exception: ServiceException = Field(default_factory=ServiceException)


class ApiErrorDetails(ResponseModel):
    """Corpo de erro retornado em respostas não-2xx."""

    request_error: RequestError = Field(default_factory=RequestError)


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Resposta tipada: status HTTP + corpo desserializado."""

    status_code: int
    body: T


# --- Bulks agendados (SMS e Email) -----------------------------------------


class ScheduledStatus(StrEnum):
    """Estados de um bulk agendado."""

    PENDING = "PENDING"
    PAUSED = "PAUSED"
    PROCESSING = "PROCESSING"
    CANCELED = "CANCELED"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class ScheduledQuery(WireModel):
    """Identifica um bulk agendado (query ``bulkId``)."""

    bulk_id: str


class RescheduleRequest(WireModel):
    send_at: str


class UpdateScheduledStatusRequest(WireModel):
    status: ScheduledStatus


class ScheduledStatusResponse(ResponseModel):
    bulk_id: str | None = None
    status: ScheduledStatus | None = None
