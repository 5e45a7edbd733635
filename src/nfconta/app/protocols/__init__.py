"""Protocolos e contratos de dados da camada de aplicação."""

from nfconta.app.protocols.models import (
    DEFAULT_OPTIONS,
    QueryParams,
    RequestOptions,
    ResponseEnvelope,
)
from nfconta.app.protocols.transport import NFHubTransportProtocol

__all__ = [
    "DEFAULT_OPTIONS",
    "NFHubTransportProtocol",
    "QueryParams",
    "RequestOptions",
    "ResponseEnvelope",
]
