"""Modelos do canal SMS.

Requisições não carregam restrições de conteúdo (ver validators/sms.py).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from infobip_channels.models.common import Price, ReportError, ResponseModel, Status, WireModel

# Modelos de bulk agendado são comuns a SMS e Email
from infobip_channels.models.common import (  # noqa: F401
    RescheduleRequest,
    ScheduledQuery,
    ScheduledStatus,
    ScheduledStatusResponse,
    UpdateScheduledStatusRequest,
)


class TimeUnit(StrEnum):
    MINUTE = "MINUTE"
    HOUR = "HOUR"
    DAY = "DAY"


class DeliveryDay(StrEnum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


# --- Requisições -----------------------------------------------------------


class Destination(WireModel):
    """Um destinatário.

    ``message_id`` é um id de correlação do cliente; a unicidade dentro
    da requisição é apenas recomendada, não verificada.
    """

    to: str
    message_id: str | None = None


class Language(WireModel):
    language_code: str | None = None


class DeliveryTime(WireModel):
    """Horário UTC de abertura/fechamento da janela de entrega."""

    hour: int
    minute: int


class DeliveryTimeWindow(WireModel):
    days: tuple[DeliveryDay, ...] = ()
    from_: DeliveryTime | None = Field(default=None, alias="from")
    to: DeliveryTime | None = None


class IndiaDlt(WireModel):
    principal_entity_id: str
    content_template_id: str | None = None


class TurkeyIys(WireModel):
    recipient_type: str
    brand_code: int | None = None


class RegionalOptions(WireModel):
    india_dlt: IndiaDlt | None = None
    turkey_iys: TurkeyIys | None = None


class Message(WireModel):
    """Mensagem SMS de texto para um ou mais destinos."""

    destinations: tuple[Destination, ...] | None = None
    text: str | None = None
    from_: str | None = Field(default=None, alias="from")
    callback_data: str | None = None
    delivery_time_window: DeliveryTimeWindow | None = None
    flash: bool | None = None
    intermediate_report: bool | None = None
    language: Language | None = None
    notify_content_type: str | None = None
    notify_url: str | None = None
    regional: RegionalOptions | None = None
    send_at: str | None = None
    transliteration: str | None = None
    validity_period: int | None = None


class BinaryData(WireModel):
    """Conteúdo binário em hexadecimal, bytes separados por espaço."""

    hex: str
    data_coding: int | None = None
    esm_class: int | None = None


class BinaryMessage(WireModel):
    destinations: tuple[Destination, ...] | None = None
    binary: BinaryData | None = None
    from_: str | None = Field(default=None, alias="from")
    callback_data: str | None = None
    delivery_time_window: DeliveryTimeWindow | None = None
    flash: bool | None = None
    intermediate_report: bool | None = None
    notify_content_type: str | None = None
    notify_url: str | None = None
    regional: RegionalOptions | None = None
    send_at: str | None = None
    validity_period: int | None = None


class SpeedLimit(WireModel):
    amount: int
    time_unit: TimeUnit | None = None


class UrlOptions(WireModel):
    shorten_url: bool | None = None
    track_clicks: bool | None = None
    tracking_url: str | None = None
    remove_protocol: bool | None = None
    custom_domain: str | None = None


class Tracking(WireModel):
    """Rastreamento de conversão (legado; incompatível com UrlOptions)."""

    base_url: str | None = None
    process_key: str | None = None
    track: str | None = None
    tracking_type: str | None = None


class SendRequest(WireModel):
    """Corpo de ``POST /sms/2/text/advanced``: 1..N mensagens."""

    messages: tuple[Message, ...] = ()
    bulk_id: str | None = None
    sending_speed_limit: SpeedLimit | None = None
    url_options: UrlOptions | None = None
    tracking: Tracking | None = None


class SendBinaryRequest(WireModel):
    messages: tuple[BinaryMessage, ...] = ()
    bulk_id: str | None = None
    sending_speed_limit: SpeedLimit | None = None


class PreviewRequest(WireModel):
    text: str
    language_code: str | None = None
    transliteration: str | None = None


class DeliveryReportsQuery(WireModel):
    bulk_id: str | None = None
    message_id: str | None = None
    limit: int | None = None


class LogsQuery(WireModel):
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    bulk_id: str | None = None
    message_id: str | None = None
    general_status: str | None = None
    sent_since: str | None = None
    sent_until: str | None = None
    limit: int | None = None
    mcc: str | None = None
    mnc: str | None = None


class InboundReportsQuery(WireModel):
    limit: int | None = None


class SendQueryParameters(WireModel):
    """Envio completo pela query string de ``GET /sms/1/text/query``.

    Autentica por ``username``/``password`` na própria query; ``to`` vai
    como lista separada por vírgula.
    """

    username: str
    password: str
    to: tuple[str, ...] = ()
    bulk_id: str | None = None
    from_: str | None = Field(default=None, alias="from")
    text: str | None = None
    flash: bool | None = None
    transliteration: str | None = None
    language_code: str | None = None
    intermediate_report: bool | None = None
    notify_url: str | None = None
    notify_content_type: str | None = None
    callback_data: str | None = None
    validity_period: int | None = None
    send_at: str | None = None
    track: str | None = None
    process_key: str | None = None
    tracking_type: str | None = None
    india_dlt_content_template_id: str | None = None
    india_dlt_principal_entity_id: str | None = None


# --- Respostas -------------------------------------------------------------


class SentMessageDetails(ResponseModel):
    message_id: str | None = None
    status: Status | None = None
    to: str | None = None


class SendResponse(ResponseModel):
    bulk_id: str | None = None
    messages: list[SentMessageDetails] = Field(default_factory=list)


class PreviewLanguageConfiguration(ResponseModel):
    language: dict[str, str] | None = None
    transliteration: str | None = None


class Preview(ResponseModel):
    characters_remaining: int | None = None
    configuration: PreviewLanguageConfiguration | None = None
    message_count: int | None = None
    text_preview: str | None = None


class PreviewResponse(ResponseModel):
    original_text: str | None = None
    previews: list[Preview] = Field(default_factory=list)


class Report(ResponseModel):
    bulk_id: str | None = None
    callback_data: str | None = None
    done_at: str | None = None
    error: ReportError | None = None
    from_: str | None = Field(default=None, alias="from")
    mcc_mnc: str | None = None
    message_id: str | None = None
    price: Price | None = None
    sent_at: str | None = None
    sms_count: int | None = None
    status: Status | None = None
    to: str | None = None


class DeliveryReportsResponse(ResponseModel):
    results: list[Report] = Field(default_factory=list)


class Log(ResponseModel):
    bulk_id: str | None = None
    done_at: str | None = None
    error: ReportError | None = None
    from_: str | None = Field(default=None, alias="from")
    mcc_mnc: str | None = None
    message_id: str | None = None
    price: Price | None = None
    sent_at: str | None = None
    sms_count: int | None = None
    status: Status | None = None
    text: str | None = None
    to: str | None = None


class LogsResponse(ResponseModel):
    results: list[Log] = Field(default_factory=list)


class InboundSmsReport(ResponseModel):
    callback_data: str | None = None
    clean_text: str | None = None
    from_: str | None = Field(default=None, alias="from")
    keyword: str | None = None
    message_id: str | None = None
    price: Price | None = None
    received_at: str | None = None
    sms_count: int | None = None
    text: str | None = None
    to: str | None = None


class InboundReportsResponse(ResponseModel):
    message_count: int | None = None
    pending_message_count: int | None = None
    results: list[InboundSmsReport] = Field(default_factory=list)


class ScheduledResponse(ResponseModel):
    bulk_id: str | None = None
    send_at: str | None = None
