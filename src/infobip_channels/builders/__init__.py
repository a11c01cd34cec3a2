"""Builders fluentes e serialização de payloads."""

from infobip_channels.builders.base import ModelBuilder
from infobip_channels.builders.email import SendEmailBuilder
from infobip_channels.builders.payload import from_payload, to_email_form, to_payload, to_query
from infobip_channels.builders.sms import (
    BinaryMessageBuilder,
    DestinationBuilder,
    MessageBuilder,
    SendBinaryRequestBuilder,
    SendRequestBuilder,
)
from infobip_channels.builders.whatsapp import TemplateMessageBuilder, WhatsAppMessageBuilder

__all__ = [
    "BinaryMessageBuilder",
    "DestinationBuilder",
    "MessageBuilder",
    "ModelBuilder",
    "SendBinaryRequestBuilder",
    "SendEmailBuilder",
    "SendRequestBuilder",
    "TemplateMessageBuilder",
    "WhatsAppMessageBuilder",
    "from_payload",
    "to_email_form",
    "to_payload",
    "to_query",
]
