"""Consultas auxiliares: categorias, registros PJBank e transações.

Estas operações só aceitam status 200 como sucesso.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfconta._base import NFContaClientBase
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy
from nfconta.api.payload_builders.nfconta import set_param_if_present

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import ResponseEnvelope


class LookupOperationsMixin(NFContaClientBase):
    """Consultas com filtro opcional por ID."""

    def get_categories(
        self,
        company_id: int,
        category_id: int = 0,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Lista categorias; com `category_id` informado, filtra por ela.

        Raises:
            RemoteError: Status diferente de 200
        """
        query = set_param_if_present(self._query(company_id, params), "category_id", category_id)
        return self._get("get_categories", ResponsePolicy.HTTP_STATUS, "nfconta/category", query)

    def get_pjbank_record(
        self,
        company_id: int,
        charge_id: int = 0,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        query = set_param_if_present(self._query(company_id, params), "charge_id", charge_id)
        return self._get("get_pjbank_record", ResponsePolicy.HTTP_STATUS, "nfconta/pjbank", query)

    def get_transactions(
        self,
        company_id: int,
        transaction_id: int = 0,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        query = set_param_if_present(
            self._query(company_id, params), "transaction_id", transaction_id
        )
        return self._get(
            "get_transactions",
            ResponsePolicy.HTTP_STATUS,
            "nfconta/transactions",
            query,
        )
