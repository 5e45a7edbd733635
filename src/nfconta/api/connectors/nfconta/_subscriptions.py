"""Assinaturas de armazenamento (WFPay) e eventos críticos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfconta._base import NFContaClientBase
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy
from nfconta.api.payload_builders.nfconta import set_param
from nfconta.api.validators.nfconta import (
    validate_critical_event_reference,
    validate_storage_subscription,
    validate_subscription_reference,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import ResponseEnvelope


class SubscriptionOperationsMixin(NFContaClientBase):
    """Assinaturas e eventos críticos da conta."""

    def create_storage_subscription(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Cria assinatura de armazenamento no WFPay.

        Args:
            company_id: ID da empresa no NFHub
            payload: Exige `customer_id` ou `customer`, `value`,
                `next_due_date`, `cycle` e `type_payment`
            params: Query params adicionais

        Raises:
            ValidationError: Campos obrigatórios ausentes (todos reunidos)
            RemoteError: Se a API responder com `message`
        """
        validate_storage_subscription(payload)
        return self._post(
            "create_storage_subscription",
            ResponsePolicy.MESSAGE,
            "nfconta/subscriptions",
            self._body(company_id, payload),
            self._params(params),
        )

    def check_storage_subscription(
        self,
        company_id: int,
        subscription_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Consulta o status de uma assinatura de armazenamento."""
        validate_subscription_reference(company_id, subscription_id, "check_storage_subscription")
        query = set_param(self._query(company_id, params), "subscription_id", subscription_id)
        return self._get(
            "check_storage_subscription",
            ResponsePolicy.MESSAGE,
            "nfconta/subscriptions",
            query,
        )

    def cancel_storage_subscription(
        self,
        company_id: int,
        subscription_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        validate_subscription_reference(company_id, subscription_id, "cancel_storage_subscription")
        return self._delete(
            "cancel_storage_subscription",
            ResponsePolicy.MESSAGE,
            f"nfconta/subscriptions/{subscription_id}",
            self._query(company_id, params),
        )

    def cancel_critical_event(
        self,
        company_id: int,
        critical_event_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Cancela um evento crítico antes da execução."""
        validate_critical_event_reference(company_id, critical_event_id)
        return self._delete(
            "cancel_critical_event",
            ResponsePolicy.MESSAGE,
            f"nfconta/critical-event/{critical_event_id}",
            self._query(company_id, params),
        )
