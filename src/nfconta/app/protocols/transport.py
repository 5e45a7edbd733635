"""Contrato de transporte HTTP consumido pelo facade NFConta.

Mantemos apenas o protocolo aqui para que o facade não dependa do
cliente httpx concreto (e os testes possam injetar um fake).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nfconta.app.protocols.models import QueryParams, RequestOptions, ResponseEnvelope


@runtime_checkable
class NFHubTransportProtocol(Protocol):
    """Operações HTTP mínimas usadas pelo facade."""

    def get(
        self,
        path: str,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope: ...

    def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope: ...

    def put(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope: ...

    def delete(
        self,
        path: str,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope: ...

    def close(self) -> None: ...
