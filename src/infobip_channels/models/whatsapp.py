"""Modelos do canal WhatsApp.

Uma mensagem de conteúdo (texto, mídia, localização, contato, interativa)
compartilha o mesmo envelope ``SendContentRequest``; templates usam
envelope próprio com failover opcional para SMS.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import Field

from infobip_channels.models.common import ResponseModel, Status, WireModel


class TemplateHeaderType(StrEnum):
    DOCUMENT = "DOCUMENT"
    IMAGE = "IMAGE"
    LOCATION = "LOCATION"
    TEXT = "TEXT"
    VIDEO = "VIDEO"


class TemplateButtonType(StrEnum):
    QUICK_REPLY = "QUICK_REPLY"
    URL = "URL"


class ContactInfoType(StrEnum):
    HOME = "HOME"
    WORK = "WORK"


class PhoneType(StrEnum):
    CELL = "CELL"
    MAIN = "MAIN"
    IPHONE = "IPHONE"
    HOME = "HOME"
    WORK = "WORK"


class InteractiveHeaderType(StrEnum):
    DOCUMENT = "DOCUMENT"
    IMAGE = "IMAGE"
    TEXT = "TEXT"
    VIDEO = "VIDEO"


# --- Conteúdos -------------------------------------------------------------


class TextContent(WireModel):
    text: str
    preview_url: bool | None = None


class DocumentContent(WireModel):
    media_url: str
    caption: str | None = None
    filename: str | None = None


class ImageContent(WireModel):
    media_url: str
    caption: str | None = None


class AudioContent(WireModel):
    media_url: str


class VideoContent(WireModel):
    media_url: str
    caption: str | None = None


class StickerContent(WireModel):
    media_url: str


class LocationContent(WireModel):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None


class ContactAddress(WireModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: ContactInfoType | None = None


class ContactEmail(WireModel):
    email: str | None = None
    type: ContactInfoType | None = None


class ContactName(WireModel):
    first_name: str
    formatted_name: str
    last_name: str | None = None
    middle_name: str | None = None
    name_suffix: str | None = None
    name_prefix: str | None = None


class ContactOrganization(WireModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactPhone(WireModel):
    phone: str | None = None
    type: PhoneType | None = None
    wa_id: str | None = None


class ContactUrl(WireModel):
    url: str | None = None
    type: ContactInfoType | None = None


class Contact(WireModel):
    name: ContactName
    addresses: tuple[ContactAddress, ...] | None = None
    birthday: str | None = None
    emails: tuple[ContactEmail, ...] | None = None
    org: ContactOrganization | None = None
    phones: tuple[ContactPhone, ...] | None = None
    urls: tuple[ContactUrl, ...] | None = None


class ContactContent(WireModel):
    contacts: tuple[Contact, ...] = ()


# --- Interativos -----------------------------------------------------------


class InteractiveBody(WireModel):
    text: str


class InteractiveFooter(WireModel):
    text: str


class InteractiveHeader(WireModel):
    """Cabeçalho interativo; ``text`` ou ``media_url`` conforme ``type``."""

    type: InteractiveHeaderType
    text: str | None = None
    media_url: str | None = None
    filename: str | None = None


class InteractiveButton(WireModel):
    id: str
    title: str
    type: str = "REPLY"


class InteractiveButtonsAction(WireModel):
    buttons: tuple[InteractiveButton, ...] = ()


class InteractiveButtonsContent(WireModel):
    body: InteractiveBody
    action: InteractiveButtonsAction
    header: InteractiveHeader | None = None
    footer: InteractiveFooter | None = None


class InteractiveRow(WireModel):
    id: str
    title: str
    description: str | None = None


class InteractiveListSection(WireModel):
    rows: tuple[InteractiveRow, ...] = ()
    title: str | None = None


class InteractiveListAction(WireModel):
    title: str
    sections: tuple[InteractiveListSection, ...] = ()


class InteractiveListContent(WireModel):
    body: InteractiveBody
    action: InteractiveListAction
    header: InteractiveHeader | None = None
    footer: InteractiveFooter | None = None


class InteractiveProductAction(WireModel):
    catalog_id: str
    product_retailer_id: str


class InteractiveProductContent(WireModel):
    action: InteractiveProductAction
    body: InteractiveBody | None = None
    footer: InteractiveFooter | None = None


class InteractiveMultiproductSection(WireModel):
    product_retailer_ids: tuple[str, ...] = ()
    title: str | None = None


class InteractiveMultiproductAction(WireModel):
    catalog_id: str
    sections: tuple[InteractiveMultiproductSection, ...] = ()


class InteractiveMultiproductContent(WireModel):
    header: InteractiveHeader
    body: InteractiveBody
    action: InteractiveMultiproductAction
    footer: InteractiveFooter | None = None


ContentT = TypeVar("ContentT", bound=WireModel)


class SendContentRequest(WireModel, Generic[ContentT]):
    """Envelope de uma mensagem WhatsApp de sessão."""

    from_: str = Field(alias="from")
    to: str
    content: ContentT
    message_id: str | None = None
    callback_data: str | None = None
    notify_url: str | None = None


SendTextRequest = SendContentRequest[TextContent]
SendDocumentRequest = SendContentRequest[DocumentContent]
SendImageRequest = SendContentRequest[ImageContent]
SendAudioRequest = SendContentRequest[AudioContent]
SendVideoRequest = SendContentRequest[VideoContent]
SendStickerRequest = SendContentRequest[StickerContent]
SendLocationRequest = SendContentRequest[LocationContent]
SendContactRequest = SendContentRequest[ContactContent]
SendInteractiveButtonsRequest = SendContentRequest[InteractiveButtonsContent]
SendInteractiveListRequest = SendContentRequest[InteractiveListContent]
SendInteractiveProductRequest = SendContentRequest[InteractiveProductContent]
SendInteractiveMultiproductRequest = SendContentRequest[InteractiveMultiproductContent]


# --- Templates -------------------------------------------------------------


class TemplateHeaderContent(WireModel):
    """Cabeçalho do template; os campos usados dependem de ``type``."""

    type: TemplateHeaderType
    media_url: str | None = None
    filename: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    placeholder: str | None = None


class TemplateBodyContent(WireModel):
    placeholders: tuple[str, ...] = ()


class TemplateButtonContent(WireModel):
    type: TemplateButtonType
    parameter: str


class TemplateData(WireModel):
    body: TemplateBodyContent = Field(default_factory=TemplateBodyContent)
    header: TemplateHeaderContent | None = None
    buttons: tuple[TemplateButtonContent, ...] | None = None


class TemplateContent(WireModel):
    template_name: str
    template_data: TemplateData
    language: str


class SmsFailover(WireModel):
    """SMS enviado se a mensagem WhatsApp não puder ser entregue."""

    from_: str = Field(alias="from")
    text: str


class FailoverMessage(WireModel):
    from_: str = Field(alias="from")
    to: str
    content: TemplateContent
    message_id: str | None = None
    callback_data: str | None = None
    notify_url: str | None = None
    sms_failover: SmsFailover | None = None


class SendTemplateRequest(WireModel):
    messages: tuple[FailoverMessage, ...] = ()
    bulk_id: str | None = None


# --- Respostas -------------------------------------------------------------


class SendContentResponse(ResponseModel):
    to: str | None = None
    message_count: int | None = None
    message_id: str | None = None
    status: Status | None = None


class SendTemplateResponse(ResponseModel):
    messages: list[SendContentResponse] = Field(default_factory=list)
    bulk_id: str | None = None
