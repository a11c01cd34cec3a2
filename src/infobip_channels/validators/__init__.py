"""Validação declarativa dos payloads de todos os canais.

Uso:
    from infobip_channels.validators import validate

    result = validate(request)
    result.raise_for_violations()
"""

from __future__ import annotations

from typing import Any

from infobip_channels.utils.errors import ValidationError
from infobip_channels.validators.email import EMAIL_RULES
from infobip_channels.validators.engine import (
    Constraint,
    ConstraintKind,
    Length,
    MutuallyExclusive,
    Nested,
    Pattern,
    Range,
    Reason,
    Required,
    ValidationEngine,
    ValidationResult,
    Violation,
)
from infobip_channels.validators.sms import SMS_RULES, find_duplicate_message_ids
from infobip_channels.validators.whatsapp import WHATSAPP_RULES

RULES: dict[type, tuple[Constraint, ...]] = {**SMS_RULES, **WHATSAPP_RULES, **EMAIL_RULES}

_engine = ValidationEngine(RULES)


def validate(entity: Any) -> ValidationResult:
    """Valida qualquer requisição registrada e retorna todas as violações."""
    return _engine.validate(entity)


__all__ = [
    "RULES",
    "Constraint",
    "ConstraintKind",
    "Length",
    "MutuallyExclusive",
    "Nested",
    "Pattern",
    "Range",
    "Reason",
    "Required",
    "ValidationEngine",
    "ValidationError",
    "ValidationResult",
    "Violation",
    "find_duplicate_message_ids",
    "validate",
]
