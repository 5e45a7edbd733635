"""Settings de acesso à API NFHub/NFConta."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_USER_AGENT: str = "nfconta-client/0.1"


@dataclass(frozen=True)
class NFHubSettings:
    """Configurações da API NFHub.

    Attributes:
        api_base_url: URL base da API (ex: https://<host>/api)
        api_token: Token de acesso enviado como Bearer
        request_timeout_seconds: Timeout para requisições HTTP
        verify_ssl: Valida certificado TLS do servidor
        user_agent: User-Agent enviado em todas as requisições
    """

    api_base_url: str = ""
    api_token: str = ""
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("NFHUB_API_BASE_URL não configurado")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append("NFHUB_API_BASE_URL deve começar com http:// ou https://")

        if not self.api_token:
            errors.append("NFHUB_API_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("NFHUB_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> NFHubSettings:
    """Carrega NFHubSettings a partir de variáveis de ambiente."""
    return NFHubSettings(
        api_base_url=os.getenv("NFHUB_API_BASE_URL", "").rstrip("/"),
        api_token=os.getenv("NFHUB_API_TOKEN", ""),
        request_timeout_seconds=float(os.getenv("NFHUB_REQUEST_TIMEOUT_SECONDS", "30")),
        verify_ssl=os.getenv("NFHUB_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
        user_agent=os.getenv("NFHUB_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_nfhub_settings() -> NFHubSettings:
    """Retorna instância cacheada de NFHubSettings."""
    return _load_from_env()
