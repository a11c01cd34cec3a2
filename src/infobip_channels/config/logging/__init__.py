"""Logging estruturado em JSON do SDK.

Uso:
    from infobip_channels.config.logging import configure_logging

    configure_logging(level="INFO", service_name="minha_app")
"""

from infobip_channels.config.logging.config import (
    SDK_LOGGER_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    install_null_handler,
)
from infobip_channels.config.logging.filters import (
    REDACTED_FIELDS,
    REDACTED_VALUE,
    InfobipContextFilter,
)
from infobip_channels.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    SDK_CONTEXT_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED_FIELDS",
    "REDACTED_VALUE",
    "REQUIRED_LOG_FIELDS",
    "SDK_CONTEXT_FIELDS",
    "SDK_LOGGER_NAME",
    "VALID_LOG_LEVELS",
    "InfobipContextFilter",
    "configure_logging",
    "create_json_formatter",
    "install_null_handler",
]
