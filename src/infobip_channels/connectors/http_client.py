"""Cliente HTTP especializado para a API Infobip.

Estende HttpClient genérico com comportamentos específicos da Infobip:
- Header ``Authorization: App <key>`` e User-Agent do SDK
- URL montada a partir da base URL pessoal da conta
- Erros ``requestError.serviceException`` viram ApiRequestError
- Corpo de resposta desserializado no modelo tipado
- Logging estruturado sem PII
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import pydantic

from infobip_channels.builders.payload import from_payload
from infobip_channels.config.settings import InfobipSettings, get_infobip_settings
from infobip_channels.connectors.api_errors import parse_api_error
from infobip_channels.connectors.api_logging import log_api_error, log_request, log_success
from infobip_channels.connectors.http_base import HttpClient, HttpClientConfig
from infobip_channels.models.common import ApiResponse
from infobip_channels.utils.errors import ApiRequestError, TransportError

if TYPE_CHECKING:
    import httpx
    from pydantic import BaseModel

logger: logging.Logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound="BaseModel")


class InfobipHttpClient(HttpClient):
    """Cliente HTTP autenticado para a API Infobip.

    As settings são imutáveis: o mesmo cliente pode atender chamadas
    concorrentes de vários canais.
    """

    def __init__(
        self,
        settings: InfobipSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa cliente Infobip.

        Args:
            settings: Credenciais e base URL da conta
            client: AsyncClient opcional (pool de conexões ou testes)
        """
        config = HttpClientConfig(
            timeout_seconds=settings.request_timeout_seconds,
            default_headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
        )
        super().__init__(config, client)
        self.settings = settings

    async def post_json(
        self,
        path: str,
        payload: dict[str, Any],
        response_model: type[ResponseT],
        params: dict[str, str] | None = None,
    ) -> ApiResponse[ResponseT]:
        return await self.call("POST", path, response_model, json=payload, params=params)

    async def put_json(
        self,
        path: str,
        payload: dict[str, Any],
        response_model: type[ResponseT],
        params: dict[str, str] | None = None,
    ) -> ApiResponse[ResponseT]:
        return await self.call("PUT", path, response_model, json=payload, params=params)

    async def post_form(
        self,
        path: str,
        parts: list[Any],
        response_model: type[ResponseT],
    ) -> ApiResponse[ResponseT]:
        """POST multipart/form-data (partes já montadas)."""
        return await self.call("POST", path, response_model, files=parts)

    async def get(
        self,
        path: str,
        response_model: type[ResponseT],
        params: dict[str, str] | None = None,
    ) -> ApiResponse[ResponseT]:
        return await self.call("GET", path, response_model, params=params)

    async def call(
        self,
        method: str,
        path: str,
        response_model: type[ResponseT],
        **kwargs: Any,
    ) -> ApiResponse[ResponseT]:
        """Executa a chamada e desserializa a resposta.

        Args:
            method: Método HTTP
            path: Path do endpoint (ex: /sms/2/text/advanced)
            response_model: Modelo do corpo de sucesso
            **kwargs: json, params ou files repassados ao HttpClient

        Returns:
            ApiResponse com status HTTP e corpo tipado

        Raises:
            ValueError: Se api_key está vazia
            ApiRequestError: Se a API responder não-2xx
            TransportError: Falha de rede ou corpo inválido
        """
        if not self.settings.api_key or not self.settings.api_key.strip():
            logger.error("api_key ausente ou vazia", extra={"endpoint": path})
            raise ValueError(
                "api_key é obrigatória para chamadas à API Infobip. "
                "Verifique se IB_API_KEY está configurado."
            )

        url = self.settings.build_url(path)
        headers = {"Authorization": self.settings.authorization_header}
        log_request(method, path)
        response = await self.request(method, url, headers=headers, **kwargs)
        return self._process_response(response, method, path, response_model)

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        response_model: type[ResponseT],
    ) -> ApiResponse[ResponseT]:
        if not response.is_success:
            self._raise_api_error(response, method, path)

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Response JSON inválido", extra={"endpoint": path})
            raise TransportError("invalid_json_response", response.status_code) from exc

        try:
            body = from_payload(response_model, data)
        except pydantic.ValidationError as exc:
            logger.error("Response fora do formato esperado", extra={"endpoint": path})
            raise TransportError("invalid_response_body", response.status_code) from exc

        log_success(method, path, response.status_code)
        return ApiResponse(status_code=response.status_code, body=body)

    def _raise_api_error(self, response: httpx.Response, method: str, path: str) -> None:
        try:
            details = parse_api_error(response.json())
        except ValueError:
            details = None
        message_id = details.request_error.service_exception.message_id if details else None
        log_api_error(response.status_code, method, path, message_id)
        raise ApiRequestError(response.status_code, details, raw_body=response.text)


def create_infobip_http_client(
    settings: InfobipSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> InfobipHttpClient:
    """Factory para criar cliente Infobip com config padrão.

    Args:
        settings: InfobipSettings opcional. Se None, carrega do ambiente.
        client: AsyncClient opcional.

    Returns:
        Cliente HTTP configurado.
    """
    return InfobipHttpClient(settings or get_infobip_settings(), client)
