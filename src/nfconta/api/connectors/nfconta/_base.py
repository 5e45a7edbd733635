"""Base do facade NFConta: montagem de params/corpo e despacho ao transporte."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy, classify_response
from nfconta.api.connectors.nfhub.nfhub_logging import log_remote_error
from nfconta.api.payload_builders.nfconta import with_company_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from types import TracebackType

    from nfconta.app.protocols.models import QueryParams, RequestOptions, ResponseEnvelope
    from nfconta.app.protocols.transport import NFHubTransportProtocol

logger = logging.getLogger(__name__)


class NFContaClientBase:
    """Estado mínimo do facade: apenas o transporte (imutável entre chamadas)."""

    def __init__(self, transport: NFHubTransportProtocol) -> None:
        self._transport = transport

    @property
    def transport(self) -> NFHubTransportProtocol:
        return self._transport

    def close(self) -> None:
        """Fecha o transporte subjacente."""
        self._transport.close()

    def __enter__(self) -> NFContaClientBase:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def _query(
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None,
    ) -> QueryParams:
        return with_company_id(params, company_id)

    @staticmethod
    def _body(company_id: int, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        body = dict(payload or {})
        body["company_id"] = company_id
        return body

    @staticmethod
    def _params(params: Iterable[Mapping[str, Any]] | None) -> QueryParams:
        return [dict(item) for item in (params or ())]

    def _check(
        self,
        operation: str,
        policy: ResponsePolicy,
        envelope: ResponseEnvelope,
    ) -> ResponseEnvelope:
        """Aplica a política de resposta da operação.

        Raises:
            RemoteError: Se a política identificar erro de negócio
        """
        error = classify_response(envelope, policy)
        if error is not None:
            log_remote_error(operation, envelope.http_code, len(error.errors))
            raise error
        logger.debug(
            "nfconta_operation_completed",
            extra={"operation": operation, "status_code": envelope.http_code},
        )
        return envelope

    def _get(
        self,
        operation: str,
        policy: ResponsePolicy,
        path: str,
        params: QueryParams,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._check(operation, policy, self._transport.get(path, params, options))

    def _post(
        self,
        operation: str,
        policy: ResponsePolicy,
        path: str,
        body: Mapping[str, Any],
        params: QueryParams,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._check(operation, policy, self._transport.post(path, body, params, options))

    def _put(
        self,
        operation: str,
        policy: ResponsePolicy,
        path: str,
        body: Mapping[str, Any],
        params: QueryParams,
    ) -> ResponseEnvelope:
        return self._check(operation, policy, self._transport.put(path, body, params))

    def _delete(
        self,
        operation: str,
        policy: ResponsePolicy,
        path: str,
        params: QueryParams,
    ) -> ResponseEnvelope:
        return self._check(operation, policy, self._transport.delete(path, params))
