"""Facade da API NFConta.

Cada método valida o payload localmente, monta path e query params e
delega ao transporte. A resposta é classificada conforme a política da
operação (ver nfhub_errors.ResponsePolicy).
"""

from __future__ import annotations

from nfconta.api.connectors.nfconta._account import AccountOperationsMixin
from nfconta.api.connectors.nfconta._charges import ChargeOperationsMixin
from nfconta.api.connectors.nfconta._lookups import LookupOperationsMixin
from nfconta.api.connectors.nfconta._payments import PaymentOperationsMixin
from nfconta.api.connectors.nfconta._subscriptions import SubscriptionOperationsMixin


class NFContaClient(
    AccountOperationsMixin,
    ChargeOperationsMixin,
    PaymentOperationsMixin,
    SubscriptionOperationsMixin,
    LookupOperationsMixin,
):
    """Cliente da conta financeira NFConta.

    Exemplo:
        with create_nfconta_client() as client:
            envelope = client.get_balance(company_id=10)
            print(envelope.body)
    """

    def __enter__(self) -> NFContaClient:
        return self
