"""Tabela de regras do canal SMS."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from infobip_channels.models.sms import (
    BinaryData,
    BinaryMessage,
    DeliveryReportsQuery,
    DeliveryTime,
    DeliveryTimeWindow,
    Destination,
    InboundReportsQuery,
    IndiaDlt,
    Language,
    LogsQuery,
    Message,
    PreviewRequest,
    RegionalOptions,
    RescheduleRequest,
    ScheduledQuery,
    SendBinaryRequest,
    SendQueryParameters,
    SendRequest,
    SpeedLimit,
    Tracking,
    TurkeyIys,
    UpdateScheduledStatusRequest,
    UrlOptions,
)
from infobip_channels.validators import limits
from infobip_channels.validators.engine import (
    Constraint,
    Length,
    MutuallyExclusive,
    Nested,
    Pattern,
    Range,
    Required,
)

logger = logging.getLogger(__name__)

_RECIPIENT = "an E.164-like phone number"
_URL = "an absolute http(s) URL"

# Opções compartilhadas entre Message e BinaryMessage
_MESSAGE_OPTIONS: tuple[Constraint, ...] = (
    Length("from_", min=limits.SMS_SENDER_MIN_LENGTH, max=limits.SMS_SENDER_MAX_LENGTH),
    Length("callback_data", max=limits.SMS_CALLBACK_DATA_MAX_LENGTH),
    Pattern("notify_url", limits.URL_PATTERN, _URL),
    Pattern(
        "notify_content_type",
        limits.NOTIFY_CONTENT_TYPE_PATTERN,
        "application/json or application/xml",
    ),
    Range(
        "validity_period",
        min=limits.SMS_VALIDITY_PERIOD_MIN,
        max=limits.SMS_VALIDITY_PERIOD_MAX,
    ),
    Nested("delivery_time_window"),
    Nested("regional"),
)

SMS_RULES: dict[type, tuple[Constraint, ...]] = {
    Destination: (
        Required("to"),
        Length("to", max=limits.SMS_DESTINATION_MAX_LENGTH),
        Pattern("to", limits.SMS_RECIPIENT_PATTERN, _RECIPIENT),
    ),
    Language: (
        Pattern("language_code", limits.LANGUAGE_CODE_PATTERN, "one of TR, ES, PT, AUTODETECT"),
    ),
    DeliveryTime: (
        Range("hour", min=limits.HOUR_MIN, max=limits.HOUR_MAX),
        Range("minute", min=limits.MINUTE_MIN, max=limits.MINUTE_MAX),
    ),
    DeliveryTimeWindow: (
        Required("days"),
        Length("days", min=limits.SMS_DELIVERY_DAYS_MIN, max=limits.SMS_DELIVERY_DAYS_MAX),
        Nested("from_"),
        Nested("to"),
    ),
    IndiaDlt: (
        Required("principal_entity_id"),
        Length("content_template_id", max=limits.SMS_INDIA_DLT_TEMPLATE_ID_MAX_LENGTH),
    ),
    TurkeyIys: (
        Required("recipient_type"),
        Pattern(
            "recipient_type",
            limits.TURKEY_RECIPIENT_TYPE_PATTERN,
            "one of TACIR, BIREYSEL",
        ),
    ),
    RegionalOptions: (
        Nested("india_dlt"),
        Nested("turkey_iys"),
    ),
    Message: (
        Required("destinations"),
        Nested("destinations"),
        Required("text"),
        *_MESSAGE_OPTIONS,
        Pattern(
            "transliteration",
            limits.TRANSLITERATION_PATTERN,
            "a supported transliteration",
        ),
        Nested("language"),
    ),
    BinaryData: (
        Required("hex"),
        Pattern("hex", limits.HEX_PAYLOAD_PATTERN, "space-separated hex bytes"),
    ),
    BinaryMessage: (
        Required("destinations"),
        Nested("destinations"),
        Required("binary"),
        Nested("binary"),
        *_MESSAGE_OPTIONS,
    ),
    SpeedLimit: (
        Range("amount", min=1),
    ),
    UrlOptions: (
        Pattern("tracking_url", limits.URL_PATTERN, _URL),
    ),
    Tracking: (),
    SendRequest: (
        Required("messages"),
        Nested("messages"),
        Nested("sending_speed_limit"),
        MutuallyExclusive("url_options", "tracking"),
        Nested("url_options"),
        Nested("tracking"),
    ),
    SendBinaryRequest: (
        Required("messages"),
        Nested("messages"),
        Nested("sending_speed_limit"),
    ),
    PreviewRequest: (
        Required("text"),
        Pattern("language_code", limits.LANGUAGE_CODE_PATTERN, "one of TR, ES, PT, AUTODETECT"),
        Pattern(
            "transliteration",
            limits.TRANSLITERATION_PATTERN,
            "a supported transliteration",
        ),
    ),
    DeliveryReportsQuery: (
        Range("limit", min=1, max=limits.SMS_REPORTS_LIMIT_MAX),
    ),
    LogsQuery: (
        Range("limit", min=1, max=limits.SMS_LOGS_LIMIT_MAX),
    ),
    InboundReportsQuery: (
        Range("limit", min=1, max=limits.SMS_INBOUND_LIMIT_MAX),
    ),
    SendQueryParameters: (
        Required("username"),
        Required("password"),
        Required("to"),
        Pattern("to", limits.SMS_RECIPIENT_PATTERN, _RECIPIENT),
        Length("from_", min=limits.SMS_SENDER_MIN_LENGTH, max=limits.SMS_SENDER_MAX_LENGTH),
        Length("callback_data", max=limits.SMS_CALLBACK_DATA_MAX_LENGTH),
        Pattern("notify_url", limits.URL_PATTERN, _URL),
        Pattern(
            "notify_content_type",
            limits.NOTIFY_CONTENT_TYPE_PATTERN,
            "application/json or application/xml",
        ),
        Range(
            "validity_period",
            min=limits.SMS_VALIDITY_PERIOD_MIN,
            max=limits.SMS_VALIDITY_PERIOD_MAX,
        ),
        Pattern("language_code", limits.LANGUAGE_CODE_PATTERN, "one of TR, ES, PT, AUTODETECT"),
        Pattern(
            "transliteration",
            limits.TRANSLITERATION_PATTERN,
            "a supported transliteration",
        ),
    ),
    # Bulks agendados: tipos comuns, valem também para o canal Email
    ScheduledQuery: (
        Required("bulk_id"),
    ),
    RescheduleRequest: (
        Required("send_at"),
    ),
    UpdateScheduledStatusRequest: (
        Required("status"),
    ),
}


def find_duplicate_message_ids(messages: Iterable[Message | BinaryMessage]) -> list[str]:
    """Retorna os message_id repetidos entre todos os destinos.

    Unicidade é só recomendada pela API: o resultado serve para log,
    nunca gera violação.
    """
    counter = Counter(
        destination.message_id
        for message in messages
        for destination in message.destinations or ()
        if destination.message_id
    )
    duplicates = sorted(mid for mid, count in counter.items() if count > 1)
    if duplicates:
        logger.debug(
            "message_id repetido na requisição",
            extra={"duplicate_count": len(duplicates)},
        )
    return duplicates
