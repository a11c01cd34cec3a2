"""Limites e padrões usados pelas tabelas de regras."""

from __future__ import annotations

import re

# SMS
SMS_CALLBACK_DATA_MAX_LENGTH = 4000
SMS_SENDER_MIN_LENGTH = 3
SMS_SENDER_MAX_LENGTH = 15
SMS_DESTINATION_MAX_LENGTH = 50
SMS_VALIDITY_PERIOD_MIN = 1
SMS_VALIDITY_PERIOD_MAX = 2880  # minutos (48h)
SMS_REPORTS_LIMIT_MAX = 1000
SMS_INBOUND_LIMIT_MAX = 1000
SMS_LOGS_LIMIT_MAX = 1000
SMS_DELIVERY_DAYS_MIN = 1
SMS_DELIVERY_DAYS_MAX = 7
SMS_INDIA_DLT_TEMPLATE_ID_MAX_LENGTH = 30
HOUR_MIN, HOUR_MAX = 0, 23
MINUTE_MIN, MINUTE_MAX = 0, 59

# WhatsApp
WHATSAPP_TEXT_MIN_LENGTH = 1
WHATSAPP_TEXT_MAX_LENGTH = 4096
WHATSAPP_CAPTION_MAX_LENGTH = 3000
WHATSAPP_FILENAME_MAX_LENGTH = 240
WHATSAPP_NUMBER_MIN_LENGTH = 1
WHATSAPP_NUMBER_MAX_LENGTH = 24
WHATSAPP_MESSAGE_ID_MAX_LENGTH = 50
WHATSAPP_CALLBACK_DATA_MAX_LENGTH = 4000
WHATSAPP_LOCATION_NAME_MAX_LENGTH = 1000
WHATSAPP_LOCATION_ADDRESS_MAX_LENGTH = 1000
LATITUDE_MIN, LATITUDE_MAX = -90.0, 90.0
LONGITUDE_MIN, LONGITUDE_MAX = -180.0, 180.0

# Interativos
INTERACTIVE_BODY_MAX_LENGTH = 1024
INTERACTIVE_FOOTER_MAX_LENGTH = 60
INTERACTIVE_HEADER_TEXT_MAX_LENGTH = 60
INTERACTIVE_BUTTONS_MAX = 3
INTERACTIVE_BUTTON_ID_MAX_LENGTH = 256
INTERACTIVE_BUTTON_TITLE_MAX_LENGTH = 20
INTERACTIVE_LIST_TITLE_MAX_LENGTH = 20
INTERACTIVE_SECTIONS_MAX = 10
INTERACTIVE_SECTION_TITLE_MAX_LENGTH = 24
INTERACTIVE_ROW_ID_MAX_LENGTH = 200
INTERACTIVE_ROW_TITLE_MAX_LENGTH = 24
INTERACTIVE_ROW_DESCRIPTION_MAX_LENGTH = 72

# Templates
TEMPLATE_NAME_MIN_LENGTH = 1
TEMPLATE_NAME_MAX_LENGTH = 512

# Email
EMAIL_SUBJECT_MAX_LENGTH = 150
EMAIL_REPORTS_LIMIT_MAX = 1000

# Padrões
SMS_RECIPIENT_PATTERN = re.compile(r"^\+?[1-9][0-9]{6,14}$")
WHATSAPP_NUMBER_PATTERN = re.compile(r"^\+?[0-9]{1,24}$")
EMAIL_ADDRESS_PATTERN = re.compile(
    r"^(?:[^<>@,]*<[^<>@\s,]+@[^<>@\s,]+\.[^<>@\s,]+>|[^<>@\s,]+@[^<>@\s,]+\.[^<>@\s,]+)$"
)
URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)
HEX_PAYLOAD_PATTERN = re.compile(r"^[0-9a-fA-F]{2}(?: [0-9a-fA-F]{2})*$")
NOTIFY_CONTENT_TYPE_PATTERN = re.compile(r"^application/(?:json|xml)$")
TRANSLITERATION_PATTERN = re.compile(
    r"^(?:TURKISH|GREEK|CYRILLIC|SERBIAN_CYRILLIC|CENTRAL_EUROPEAN|BALTIC|NON_UNICODE)$"
)
LANGUAGE_CODE_PATTERN = re.compile(r"^(?:TR|ES|PT|AUTODETECT)$")
TURKEY_RECIPIENT_TYPE_PATTERN = re.compile(r"^(?:TACIR|BIREYSEL)$")
