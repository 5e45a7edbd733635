"""Factory do cliente NFConta a partir das settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from nfconta.api.connectors.nfconta import NFContaClient
from nfconta.api.connectors.nfhub import HttpClientConfig, NFHubHttpClient
from nfconta.config.settings import get_nfhub_settings

if TYPE_CHECKING:
    import httpx

    from nfconta.config.settings import NFHubSettings

logger = logging.getLogger(__name__)


def create_http_client_config(settings: NFHubSettings) -> HttpClientConfig:
    return HttpClientConfig(
        base_url=settings.api_base_url,
        token=settings.api_token,
        timeout_seconds=settings.request_timeout_seconds,
        verify_ssl=settings.verify_ssl,
        user_agent=settings.user_agent,
    )


def create_nfconta_client(
    settings: NFHubSettings | None = None,
    http_client: httpx.Client | None = None,
) -> NFContaClient:
    """Cria o facade NFConta com transporte httpx.

    Args:
        settings: Settings explícitas; sem elas, carrega do ambiente
        http_client: httpx.Client pré-configurado (ex: testes com MockTransport)

    Returns:
        NFContaClient pronto para uso

    Raises:
        ValueError: Se as settings forem inválidas
    """
    settings = settings or get_nfhub_settings()
    errors = settings.validate()
    if errors:
        msg = "; ".join(errors)
        raise ValueError(msg)

    transport = NFHubHttpClient(create_http_client_config(settings), http_client=http_client)
    logger.info(
        "nfconta_client_created",
        extra={
            "host": urlsplit(settings.api_base_url).hostname,
            "timeout_seconds": settings.request_timeout_seconds,
        },
    )
    return NFContaClient(transport)
