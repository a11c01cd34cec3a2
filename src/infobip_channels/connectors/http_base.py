"""Cliente HTTP base para os conectores.

Uma tentativa por chamada: sem retry nem backoff. Falhas de rede viram
TransportError sem dados sensíveis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from infobip_channels.utils.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Um ``httpx.AsyncClient`` pode ser injetado para reaproveitar conexões
    (ou para testes com MockTransport). Sem ele, cada chamada abre e
    fecha seu próprio cliente.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        files: list[Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa uma requisição HTTP.

        Raises:
            TransportError: Timeout ou falha de conexão.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            if self._client is not None:
                return await self._client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    files=files,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
            async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                return await client.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    files=files,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise TransportError("http_connection_error") from exc
