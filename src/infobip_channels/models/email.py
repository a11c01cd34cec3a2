"""Modelos do canal Email.

O envio é multipart/form-data (não JSON): os nomes de campo do formulário
são os mesmos aliases camelCase usados nos demais canais.
"""

from __future__ import annotations

from pydantic import Field

from infobip_channels.models.common import (
    Price,
    ReportError,
    ResponseModel,
    ScheduledStatus,
    Status,
    WireModel,
)


class SendEmailRequest(WireModel):
    """Corpo de ``POST /email/3/send``.

    ``attachment`` e ``inline_image`` são caminhos de arquivo locais,
    lidos só no momento do envio.
    """

    to: str
    from_: str | None = Field(default=None, alias="from")
    cc: str | None = None
    bcc: str | None = None
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    amp_html: str | None = None
    template_id: int | None = None
    attachment: str | None = None
    inline_image: str | None = None
    intermediate_report: bool | None = None
    notify_url: str | None = None
    notify_content_type: str | None = None
    callback_data: str | None = None
    track: bool | None = None
    track_clicks: bool | None = None
    track_opens: bool | None = None
    tracking_url: str | None = None
    bulk_id: str | None = None
    message_id: str | None = None
    reply_to: str | None = None
    default_placeholders: str | None = None
    preserve_recipients: bool | None = None
    send_at: str | None = None
    landing_page_placeholders: str | None = None
    landing_page_id: str | None = None


class ValidateAddressRequest(WireModel):
    to: str


class EmailDeliveryReportsQuery(WireModel):
    bulk_id: str | None = None
    message_id: str | None = None
    limit: int | None = None


class EmailLogsQuery(WireModel):
    message_id: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    bulk_id: str | None = None
    general_status: str | None = None
    sent_since: str | None = None
    sent_until: str | None = None
    limit: int | None = None


# --- Respostas -------------------------------------------------------------


class SentEmailDetails(ResponseModel):
    to: str | None = None
    message_count: int | None = None
    message_id: str | None = None
    status: Status | None = None


class SendEmailResponse(ResponseModel):
    bulk_id: str | None = None
    messages: list[SentEmailDetails] = Field(default_factory=list)


class ValidateAddressResponse(ResponseModel):
    to: str | None = None
    valid_mailbox: str | None = None
    valid_syntax: bool | None = None
    catch_all: bool | None = None
    did_you_mean: str | None = None
    disposable: bool | None = None
    role_based: bool | None = None
    reason: str | None = None


class EmailReport(ResponseModel):
    bulk_id: str | None = None
    message_id: str | None = None
    to: str | None = None
    sent_at: str | None = None
    done_at: str | None = None
    message_count: int | None = None
    price: Price | None = None
    status: Status | None = None
    error: ReportError | None = None
    channel: str | None = None


class EmailDeliveryReportsResponse(ResponseModel):
    results: list[EmailReport] = Field(default_factory=list)


class EmailLog(ResponseModel):
    message_id: str | None = None
    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    text: str | None = None
    sent_at: str | None = None
    done_at: str | None = None
    message_count: int | None = None
    price: Price | None = None
    status: Status | None = None
    bulk_id: str | None = None


class EmailLogsResponse(ResponseModel):
    results: list[EmailLog] = Field(default_factory=list)


# ``sendAt`` volta como epoch em milissegundos ou como texto ISO-8601


class EmailBulk(ResponseModel):
    bulk_id: str | None = None
    send_at: int | str | None = None


class EmailBulksResponse(ResponseModel):
    """Corpo de ``GET /email/1/bulks``."""

    external_bulk_id: str | None = None
    bulks: list[EmailBulk] = Field(default_factory=list)


class EmailRescheduleResponse(ResponseModel):
    bulk_id: str | None = None
    send_at: int | str | None = None


class EmailBulkStatus(ResponseModel):
    bulk_id: str | None = None
    status: ScheduledStatus | None = None


class EmailBulksStatusResponse(ResponseModel):
    """Corpo de ``GET /email/1/bulks/status``."""

    external_bulk_id: str | None = None
    bulks: list[EmailBulkStatus] = Field(default_factory=list)
