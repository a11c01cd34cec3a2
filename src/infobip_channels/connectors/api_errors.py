"""Parsing do corpo de erro da API Infobip."""

from __future__ import annotations

from typing import Any

import pydantic

from infobip_channels.models.common import ApiErrorDetails


def parse_api_error(response_data: Any) -> ApiErrorDetails | None:
    """Extrai ``requestError.serviceException`` do response.

    Args:
        response_data: JSON decodificado do response

    Returns:
        ApiErrorDetails se o corpo segue o formato de erro, None caso contrário
    """
    if not isinstance(response_data, dict) or "requestError" not in response_data:
        return None
    try:
        return ApiErrorDetails.model_validate(response_data)
    except pydantic.ValidationError:
        return None


def is_permanent_error(status_code: int) -> bool:
    """Classifica o status como permanente (não adianta reenviar).

    Permanentes: 4xx exceto 408 e 429.
    """
    return 400 <= status_code < 500 and status_code not in {408, 429}
