"""Exceções do SDK agrupadas por fase: construção, validação e transporte."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infobip_channels.models.common import ApiErrorDetails
    from infobip_channels.validators.engine import Violation


class InfobipError(Exception):
    """Base para todos os erros levantados pelo SDK."""


class BuildError(InfobipError):
    """Falha ao montar uma entidade a partir de um builder."""


class MissingRequiredField(BuildError):
    """Campo obrigatório não informado antes de ``build()``."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required field: {field}")
        self.field = field


class ValidationError(InfobipError):
    """Entidade completa com uma ou mais violações de restrição.

    Carrega todas as violações encontradas, nunca apenas a primeira.
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        fields = ", ".join(f"{v.field} ({v.reason})" for v in violations)
        super().__init__(f"{len(violations)} validation violation(s): {fields}")
        self.violations = violations


class TransportError(InfobipError):
    """Falha de rede, protocolo ou desserialização após a chamada HTTP."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiRequestError(TransportError):
    """Resposta não-2xx da API, com detalhes de erro quando presentes."""

    def __init__(
        self,
        status_code: int,
        details: ApiErrorDetails | None = None,
        raw_body: str = "",
    ) -> None:
        text = ""
        if details is not None:
            text = details.request_error.service_exception.text or ""
        super().__init__(f"api_request_error: {status_code} {text}".rstrip(), status_code)
        self.details = details
        self.raw_body = raw_body
