"""Settings de acesso à API Infobip.

Duas informações bastam para qualquer canal: API key e base URL.
Podem vir do ambiente (IB_API_KEY, IB_BASE_URL) ou ser passadas em memória.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_API_KEY_PREFIX: str = "App"
DEFAULT_USER_AGENT: str = "infobip-channels-python/0.6.0"


@dataclass(frozen=True)
class InfobipSettings:
    """Configurações de acesso à API.

    Imutável após criação: pode ser compartilhada entre clientes e chamadas
    concorrentes sem locks.

    Attributes:
        api_key: Chave de API da conta Infobip
        base_url: URL base pessoal (ex: https://xxxxx.api.infobip.com)
        api_key_prefix: Prefixo do header Authorization
        request_timeout_seconds: Timeout para requisições HTTP
        user_agent: Valor do header User-Agent
    """

    api_key: str = ""
    base_url: str = ""
    api_key_prefix: str = DEFAULT_API_KEY_PREFIX
    request_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def api_endpoint(self) -> str:
        """URL base normalizada, com esquema e sem barra final."""
        url = self.base_url.strip().rstrip("/")
        if url and "://" not in url:
            url = f"https://{url}"
        return url

    @property
    def authorization_header(self) -> str:
        """Valor completo do header Authorization."""
        return f"{self.api_key_prefix} {self.api_key}".strip()

    def build_url(self, path: str) -> str:
        """Retorna URL completa para o path do endpoint.

        Raises:
            ValueError: Se base_url não configurada.
        """
        if not self.api_endpoint:
            raise ValueError("base_url é obrigatória")
        return f"{self.api_endpoint}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.api_key:
            errors.append("IB_API_KEY não configurado")
        if not self.base_url:
            errors.append("IB_BASE_URL não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("IB_REQUEST_TIMEOUT_SECONDS deve ser positivo")
        return errors


def load_infobip_settings() -> InfobipSettings:
    """Carrega InfobipSettings de variáveis de ambiente."""
    return InfobipSettings(
        api_key=os.getenv("IB_API_KEY", ""),
        base_url=os.getenv("IB_BASE_URL", ""),
        api_key_prefix=os.getenv("IB_API_KEY_PREFIX", DEFAULT_API_KEY_PREFIX),
        request_timeout_seconds=float(os.getenv("IB_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_infobip_settings() -> InfobipSettings:
    """Retorna instância cacheada de InfobipSettings."""
    return load_infobip_settings()
