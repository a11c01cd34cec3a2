"""Filter que prepara cada record do SDK para o formatter JSON."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from infobip_channels.config.logging.formatters import SDK_CONTEXT_FIELDS

if TYPE_CHECKING:
    from collections.abc import Callable

# Chaves de ``extra`` que nunca saem em claro
REDACTED_FIELDS = frozenset({"api_key", "authorization", "password"})
REDACTED_VALUE = "[REDACTED]"


class InfobipContextFilter(logging.Filter):
    """Injeta ``service``, ``correlation_id`` e o contexto HTTP padrão.

    Um correlation_id passado via ``extra`` tem precedência sobre o getter.
    Campos de REDACTED_FIELDS têm o valor substituído.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = self._service_name
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        for field in SDK_CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, None)
        for field in REDACTED_FIELDS & record.__dict__.keys():
            setattr(record, field, REDACTED_VALUE)
        return True
