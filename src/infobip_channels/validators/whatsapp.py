"""Tabela de regras do canal WhatsApp."""

from __future__ import annotations

from infobip_channels.models.whatsapp import (
    AudioContent,
    Contact,
    ContactContent,
    ContactEmail,
    ContactName,
    ContactUrl,
    DocumentContent,
    FailoverMessage,
    ImageContent,
    InteractiveBody,
    InteractiveButton,
    InteractiveButtonsAction,
    InteractiveButtonsContent,
    InteractiveFooter,
    InteractiveHeader,
    InteractiveListAction,
    InteractiveListContent,
    InteractiveListSection,
    InteractiveMultiproductAction,
    InteractiveMultiproductContent,
    InteractiveMultiproductSection,
    InteractiveProductAction,
    InteractiveProductContent,
    InteractiveRow,
    LocationContent,
    SendContentRequest,
    SendTemplateRequest,
    SmsFailover,
    StickerContent,
    TemplateBodyContent,
    TemplateButtonContent,
    TemplateContent,
    TemplateData,
    TemplateHeaderContent,
    TextContent,
    VideoContent,
)
from infobip_channels.validators import limits
from infobip_channels.validators.engine import Constraint, Length, Nested, Pattern, Range, Required

_NUMBER = "a phone number of 1 to 24 digits"
_URL = "an absolute http(s) URL"


def _number(field: str) -> tuple[Constraint, ...]:
    return (
        Required(field),
        Length(
            field,
            min=limits.WHATSAPP_NUMBER_MIN_LENGTH,
            max=limits.WHATSAPP_NUMBER_MAX_LENGTH,
        ),
        Pattern(field, limits.WHATSAPP_NUMBER_PATTERN, _NUMBER),
    )


def _media(*extra: Constraint) -> tuple[Constraint, ...]:
    return (
        Required("media_url"),
        Pattern("media_url", limits.URL_PATTERN, _URL),
        *extra,
    )


def _bounded_text(field: str, max: int) -> tuple[Constraint, ...]:
    return (Required(field), Length(field, max=max))


_CAPTION = Length("caption", max=limits.WHATSAPP_CAPTION_MAX_LENGTH)

# Corpo, ação, cabeçalho e rodapé de conteúdos interativos
_INTERACTIVE_PARTS: tuple[Constraint, ...] = (
    Nested("header"),
    Nested("body"),
    Nested("action"),
    Nested("footer"),
)

# Campos de envelope comuns às mensagens de sessão e de template
_ENVELOPE: tuple[Constraint, ...] = (
    *_number("from_"),
    *_number("to"),
    Length("message_id", max=limits.WHATSAPP_MESSAGE_ID_MAX_LENGTH),
    Length("callback_data", max=limits.WHATSAPP_CALLBACK_DATA_MAX_LENGTH),
    Pattern("notify_url", limits.URL_PATTERN, _URL),
)

WHATSAPP_RULES: dict[type, tuple[Constraint, ...]] = {
    TextContent: (
        Required("text"),
        Length(
            "text",
            min=limits.WHATSAPP_TEXT_MIN_LENGTH,
            max=limits.WHATSAPP_TEXT_MAX_LENGTH,
        ),
    ),
    DocumentContent: _media(
        _CAPTION,
        Length("filename", max=limits.WHATSAPP_FILENAME_MAX_LENGTH),
    ),
    ImageContent: _media(_CAPTION),
    AudioContent: _media(),
    VideoContent: _media(_CAPTION),
    StickerContent: _media(),
    LocationContent: (
        Range("latitude", min=limits.LATITUDE_MIN, max=limits.LATITUDE_MAX),
        Range("longitude", min=limits.LONGITUDE_MIN, max=limits.LONGITUDE_MAX),
        Length("name", max=limits.WHATSAPP_LOCATION_NAME_MAX_LENGTH),
        Length("address", max=limits.WHATSAPP_LOCATION_ADDRESS_MAX_LENGTH),
    ),
    # Contatos
    ContactName: (
        Required("first_name"),
        Required("formatted_name"),
    ),
    ContactEmail: (
        Pattern("email", limits.EMAIL_ADDRESS_PATTERN, "an email address"),
    ),
    ContactUrl: (
        Pattern("url", limits.URL_PATTERN, _URL),
    ),
    Contact: (
        Nested("name"),
        Nested("emails"),
        Nested("urls"),
    ),
    ContactContent: (
        Required("contacts"),
        Nested("contacts"),
    ),
    # Interativos
    InteractiveBody: _bounded_text("text", limits.INTERACTIVE_BODY_MAX_LENGTH),
    InteractiveFooter: _bounded_text("text", limits.INTERACTIVE_FOOTER_MAX_LENGTH),
    InteractiveHeader: (
        Length("text", max=limits.INTERACTIVE_HEADER_TEXT_MAX_LENGTH),
        Pattern("media_url", limits.URL_PATTERN, _URL),
    ),
    InteractiveButton: (
        *_bounded_text("id", limits.INTERACTIVE_BUTTON_ID_MAX_LENGTH),
        *_bounded_text("title", limits.INTERACTIVE_BUTTON_TITLE_MAX_LENGTH),
    ),
    InteractiveButtonsAction: (
        Required("buttons"),
        Length("buttons", max=limits.INTERACTIVE_BUTTONS_MAX),
        Nested("buttons"),
    ),
    InteractiveButtonsContent: _INTERACTIVE_PARTS,
    InteractiveRow: (
        *_bounded_text("id", limits.INTERACTIVE_ROW_ID_MAX_LENGTH),
        *_bounded_text("title", limits.INTERACTIVE_ROW_TITLE_MAX_LENGTH),
        Length("description", max=limits.INTERACTIVE_ROW_DESCRIPTION_MAX_LENGTH),
    ),
    InteractiveListSection: (
        Length("title", max=limits.INTERACTIVE_SECTION_TITLE_MAX_LENGTH),
        Required("rows"),
        Nested("rows"),
    ),
    InteractiveListAction: (
        *_bounded_text("title", limits.INTERACTIVE_LIST_TITLE_MAX_LENGTH),
        Required("sections"),
        Length("sections", max=limits.INTERACTIVE_SECTIONS_MAX),
        Nested("sections"),
    ),
    InteractiveListContent: _INTERACTIVE_PARTS,
    InteractiveProductAction: (
        Required("catalog_id"),
        Required("product_retailer_id"),
    ),
    InteractiveProductContent: _INTERACTIVE_PARTS[1:],
    InteractiveMultiproductSection: (
        Length("title", max=limits.INTERACTIVE_SECTION_TITLE_MAX_LENGTH),
        Required("product_retailer_ids"),
    ),
    InteractiveMultiproductAction: (
        Required("catalog_id"),
        Required("sections"),
        Length("sections", max=limits.INTERACTIVE_SECTIONS_MAX),
        Nested("sections"),
    ),
    InteractiveMultiproductContent: _INTERACTIVE_PARTS,
    SendContentRequest: (
        *_ENVELOPE,
        Nested("content"),
    ),
    TemplateHeaderContent: (
        Pattern("media_url", limits.URL_PATTERN, _URL),
        Range("latitude", min=limits.LATITUDE_MIN, max=limits.LATITUDE_MAX),
        Range("longitude", min=limits.LONGITUDE_MIN, max=limits.LONGITUDE_MAX),
    ),
    TemplateBodyContent: (),
    TemplateButtonContent: (
        Required("parameter"),
    ),
    TemplateData: (
        Nested("body"),
        Nested("header"),
        Nested("buttons"),
    ),
    TemplateContent: (
        Required("template_name"),
        Length(
            "template_name",
            min=limits.TEMPLATE_NAME_MIN_LENGTH,
            max=limits.TEMPLATE_NAME_MAX_LENGTH,
        ),
        Required("language"),
        Nested("template_data"),
    ),
    SmsFailover: (
        Required("from_"),
        Length("from_", min=limits.SMS_SENDER_MIN_LENGTH, max=limits.SMS_SENDER_MAX_LENGTH),
        Required("text"),
    ),
    FailoverMessage: (
        *_ENVELOPE,
        Nested("content"),
        Nested("sms_failover"),
    ),
    SendTemplateRequest: (
        Required("messages"),
        Nested("messages"),
    ),
}
