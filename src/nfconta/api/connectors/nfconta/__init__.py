"""Facade NFConta.

Uso:
    from nfconta.api.connectors.nfconta import NFContaClient, capture

    client = NFContaClient(transport)
    result = capture(client.get_statement, 10)
"""

from nfconta.api.connectors.nfconta.client import NFContaClient
from nfconta.api.connectors.nfconta.result import OperationResult, capture

__all__ = [
    "NFContaClient",
    "OperationResult",
    "capture",
]
