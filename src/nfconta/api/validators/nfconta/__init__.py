"""Validadores de payload das operações NFConta.

Cada validador reúne TODAS as violações da operação e levanta uma única
ValidationError antes de qualquer chamada de rede.

Uso:
    from nfconta.api.validators.nfconta import validate_charge

    validate_charge({"customer_id": 1, "value": 10.0, "due_date": "2026-11-01"})
"""

from nfconta.api.validators.nfconta.charges import (
    CARD_CHARGE_TYPE,
    collect_contract_charge_violations,
    is_card_charge,
    validate_charge,
    validate_charge_update,
    validate_contract_charge,
    validate_deposit,
)
from nfconta.api.validators.nfconta.documents import (
    DOCUMENT_TYPES,
    collect_document_violations,
    validate_documents,
)
from nfconta.api.validators.nfconta.payments import (
    validate_payment,
    validate_payment_simulation,
    validate_transfer,
)
from nfconta.api.validators.nfconta.rules import (
    collect_missing,
    is_empty,
    is_missing,
    raise_if_violations,
)
from nfconta.api.validators.nfconta.subscriptions import (
    validate_critical_event_reference,
    validate_storage_subscription,
    validate_subscription_reference,
)

__all__ = [
    "CARD_CHARGE_TYPE",
    "DOCUMENT_TYPES",
    "collect_contract_charge_violations",
    "collect_document_violations",
    "collect_missing",
    "is_card_charge",
    "is_empty",
    "is_missing",
    "raise_if_violations",
    "validate_charge",
    "validate_charge_update",
    "validate_contract_charge",
    "validate_critical_event_reference",
    "validate_deposit",
    "validate_documents",
    "validate_payment",
    "validate_payment_simulation",
    "validate_storage_subscription",
    "validate_subscription_reference",
    "validate_transfer",
]
