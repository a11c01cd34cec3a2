"""Base dos clientes por canal: valida antes de qualquer I/O."""

from __future__ import annotations

from typing import Any

from infobip_channels.config.settings import InfobipSettings
from infobip_channels.connectors.api_logging import log_validation_failure
from infobip_channels.connectors.http_client import InfobipHttpClient, create_infobip_http_client
from infobip_channels.validators import ValidationResult, Violation, validate


class ChannelClient:
    """Cliente de um canal sobre um InfobipHttpClient compartilhável."""

    def __init__(
        self,
        http: InfobipHttpClient | None = None,
        settings: InfobipSettings | None = None,
    ) -> None:
        self.http = http or create_infobip_http_client(settings)

    def check(self, *entities: Any) -> None:
        """Valida todas as entidades da chamada e levanta uma única vez.

        Query e corpo de uma mesma operação são validados juntos, então o
        erro carrega as violações de ambos.

        Raises:
            ValidationError: Se alguma entidade violar suas regras.
        """
        violations: list[Violation] = []
        for entity in entities:
            violations.extend(validate(entity).violations)
        result = ValidationResult(tuple(violations))
        if not result.is_valid:
            log_validation_failure("+".join(type(e).__name__ for e in entities), result)
        result.raise_for_violations()
