"""Cliente Python da conta financeira NFConta (plataforma NFHub).

Uso:
    from nfconta import create_nfconta_client

    with create_nfconta_client() as client:
        client.check_account_active(company_id=10)
"""

from nfconta.api.connectors.nfconta import NFContaClient, OperationResult, capture
from nfconta.api.connectors.nfhub import HttpClientConfig, NFHubHttpClient, ResponsePolicy
from nfconta.app.bootstrap import create_nfconta_client
from nfconta.app.protocols import NFHubTransportProtocol, RequestOptions, ResponseEnvelope
from nfconta.utils.errors import NFContaError, RemoteError, TransportError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "HttpClientConfig",
    "NFContaClient",
    "NFContaError",
    "NFHubHttpClient",
    "NFHubTransportProtocol",
    "OperationResult",
    "RemoteError",
    "RequestOptions",
    "ResponseEnvelope",
    "ResponsePolicy",
    "TransportError",
    "ValidationError",
    "capture",
    "create_nfconta_client",
]
