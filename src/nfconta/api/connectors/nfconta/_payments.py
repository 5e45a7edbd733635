"""Pagamento de contas e transferências.

Todas as operações daqui devolvem o envelope sem inspeção da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfconta._base import NFContaClientBase
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy
from nfconta.api.validators.nfconta import (
    validate_payment,
    validate_payment_simulation,
    validate_transfer,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import ResponseEnvelope


class PaymentOperationsMixin(NFContaClientBase):
    """Saídas de dinheiro da conta NFConta."""

    def simulate_payment(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Simula o pagamento de um boleto a partir de `code` ou `bar_code`."""
        validate_payment_simulation(payload)
        return self._post(
            "simulate_payment",
            ResponsePolicy.RAW,
            "nfconta/payments/simulate",
            self._body(company_id, payload),
            self._params(params),
        )

    def create_payment(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Paga um boleto.

        Args:
            company_id: ID da empresa no NFHub
            payload: Exige `code` (linha digitável) e `token` (Google Authenticator)
            params: Query params adicionais

        Raises:
            ValidationError: Campos obrigatórios ausentes
        """
        validate_payment(payload)
        return self._post(
            "create_payment",
            ResponsePolicy.RAW,
            "nfconta/payments",
            self._body(company_id, payload),
            self._params(params),
        )

    def schedule_payment(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._post(
            "schedule_payment",
            ResponsePolicy.RAW,
            "nfconta/payments/schedule",
            self._body(company_id, payload),
            self._params(params),
        )

    def schedule_transfer(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._post(
            "schedule_transfer",
            ResponsePolicy.RAW,
            "nfconta/transfers/schedule",
            self._body(company_id, payload),
            self._params(params),
        )

    def get_payment(
        self,
        company_id: int,
        historic_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_payment",
            ResponsePolicy.RAW,
            f"nfconta/payments/{historic_id}",
            self._query(company_id, params),
        )

    def transfer(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Transfere dinheiro para outra conta bancária.

        Raises:
            ValidationError: Dados bancários, valor ou token ausentes (todos reunidos)
        """
        validate_transfer(payload)
        return self._post(
            "transfer",
            ResponsePolicy.RAW,
            "nfconta/transfers",
            self._body(company_id, payload),
            self._params(params),
        )
