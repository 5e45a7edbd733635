"""Transporte HTTP da plataforma NFHub.

Uso:
    from nfconta.api.connectors.nfhub import HttpClientConfig, NFHubHttpClient

    transport = NFHubHttpClient(HttpClientConfig(base_url="https://api.nfhub.com.br", token="..."))
    envelope = transport.get("nfconta/balance", [{"name": "company_id", "value": 10}])
"""

from nfconta.api.connectors.nfhub.http_base import HttpClientConfig, NFHubHttpClient
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy, classify_response

__all__ = [
    "HttpClientConfig",
    "NFHubHttpClient",
    "ResponsePolicy",
    "classify_response",
]
