"""Tabela de regras do canal Email."""

from __future__ import annotations

from infobip_channels.models.email import (
    EmailDeliveryReportsQuery,
    EmailLogsQuery,
    SendEmailRequest,
    ValidateAddressRequest,
)
from infobip_channels.validators import limits
from infobip_channels.validators.engine import Constraint, Length, Pattern, Range, Required

_ADDRESS = "an email address"
_ADDRESS_LIST = "a comma-separated list of email addresses"

EMAIL_RULES: dict[type, tuple[Constraint, ...]] = {
    SendEmailRequest: (
        Required("to"),
        Pattern("to", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS),
        Pattern("from_", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS),
        Pattern("cc", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS_LIST, separator=","),
        Pattern("bcc", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS_LIST, separator=","),
        Pattern("reply_to", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS),
        Length("subject", max=limits.EMAIL_SUBJECT_MAX_LENGTH),
        Required("text", "html", "amp_html", "template_id"),
        Pattern("notify_url", limits.URL_PATTERN, "an absolute http(s) URL"),
        Pattern(
            "notify_content_type",
            limits.NOTIFY_CONTENT_TYPE_PATTERN,
            "application/json or application/xml",
        ),
        Pattern("tracking_url", limits.URL_PATTERN, "an absolute http(s) URL"),
    ),
    ValidateAddressRequest: (
        Required("to"),
        Pattern("to", limits.EMAIL_ADDRESS_PATTERN, _ADDRESS),
    ),
    EmailDeliveryReportsQuery: (
        Range("limit", min=1, max=limits.EMAIL_REPORTS_LIMIT_MAX),
    ),
    EmailLogsQuery: (
        Range("limit", min=1, max=limits.EMAIL_REPORTS_LIMIT_MAX),
    ),
}
