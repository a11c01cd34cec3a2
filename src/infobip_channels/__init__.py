"""Cliente Python da API Infobip para SMS, WhatsApp e Email.

Fluxo: builder -> validação -> serialização -> transporte.

Uso:
    from infobip_channels import InfobipSettings, MessageBuilder, SendRequestBuilder, SmsClient

    request = (
        SendRequestBuilder()
        .add_message(MessageBuilder().add_destination("41793026727").text("Olá"))
        .default_sender("InfoSMS")
        .build()
    )
    client = SmsClient(settings=InfobipSettings(api_key="...", base_url="..."))
    response = await client.send(request)
"""

from infobip_channels.builders import (
    BinaryMessageBuilder,
    DestinationBuilder,
    MessageBuilder,
    SendBinaryRequestBuilder,
    SendEmailBuilder,
    SendRequestBuilder,
    TemplateMessageBuilder,
    WhatsAppMessageBuilder,
    from_payload,
    to_payload,
)
from infobip_channels.config.logging import configure_logging, install_null_handler
from infobip_channels.config.settings import InfobipSettings, get_infobip_settings
from infobip_channels.connectors import (
    EmailClient,
    InfobipHttpClient,
    SmsClient,
    WhatsAppClient,
)
from infobip_channels.models import ApiResponse
from infobip_channels.utils.errors import (
    ApiRequestError,
    BuildError,
    InfobipError,
    MissingRequiredField,
    TransportError,
    ValidationError,
)
from infobip_channels.validators import ValidationResult, Violation, validate

__version__ = "0.6.0"

install_null_handler()

__all__ = [
    "ApiRequestError",
    "ApiResponse",
    "BinaryMessageBuilder",
    "BuildError",
    "DestinationBuilder",
    "EmailClient",
    "InfobipError",
    "InfobipHttpClient",
    "InfobipSettings",
    "MessageBuilder",
    "MissingRequiredField",
    "SendBinaryRequestBuilder",
    "SendEmailBuilder",
    "SendRequestBuilder",
    "SmsClient",
    "TemplateMessageBuilder",
    "TransportError",
    "ValidationError",
    "ValidationResult",
    "Violation",
    "WhatsAppClient",
    "WhatsAppMessageBuilder",
    "configure_logging",
    "from_payload",
    "get_infobip_settings",
    "to_payload",
    "validate",
]
