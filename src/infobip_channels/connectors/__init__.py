"""Transporte HTTP e clientes por canal."""

from infobip_channels.connectors.channel import ChannelClient
from infobip_channels.connectors.email import EmailClient
from infobip_channels.connectors.http_base import HttpClient, HttpClientConfig
from infobip_channels.connectors.http_client import (
    InfobipHttpClient,
    create_infobip_http_client,
)
from infobip_channels.connectors.sms import SmsClient
from infobip_channels.connectors.whatsapp import WhatsAppClient

__all__ = [
    "ChannelClient",
    "EmailClient",
    "HttpClient",
    "HttpClientConfig",
    "InfobipHttpClient",
    "SmsClient",
    "WhatsAppClient",
    "create_infobip_http_client",
]
