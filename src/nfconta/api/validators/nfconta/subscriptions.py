"""Validação de assinaturas de armazenamento e eventos críticos."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nfconta.api.validators.nfconta.rules import (
    collect_missing,
    is_empty,
    is_missing,
    raise_if_violations,
)

_COMPANY_ID_MESSAGE = "O ID da empresa é obrigatório"

_SUBSCRIPTION_RULES = (
    ("value", "O valor da assinatura é obrigatório"),
    ("next_due_date", "A data de vencimento da assinatura é obrigatória"),
    ("cycle", "O ciclo da assinatura é obrigatório"),
    ("type_payment", "O tipo de pagamento da assinatura é obrigatório"),
)


def validate_storage_subscription(payload: Mapping[str, Any]) -> None:
    """Exige cliente (`customer_id` ou `customer`), valor, vencimento, ciclo e forma de pagamento."""
    violations: list[str] = []
    if is_missing(payload, "customer_id") and is_missing(payload, "customer"):
        violations.append("O cliente é obrigatório")
    violations.extend(collect_missing(payload, _SUBSCRIPTION_RULES))
    raise_if_violations(violations, "create_storage_subscription")


def _collect_ids(company_id: int, resource_id: int, resource_message: str) -> list[str]:
    violations: list[str] = []
    if is_empty(company_id):
        violations.append(_COMPANY_ID_MESSAGE)
    if is_empty(resource_id):
        violations.append(resource_message)
    return violations


def validate_subscription_reference(company_id: int, subscription_id: int, operation: str) -> None:
    raise_if_violations(
        _collect_ids(company_id, subscription_id, "O ID da assinatura é obrigatório"),
        operation,
    )


def validate_critical_event_reference(company_id: int, critical_event_id: int) -> None:
    raise_if_violations(
        _collect_ids(company_id, critical_event_id, "O ID do evento crítico é obrigatório"),
        "cancel_critical_event",
    )
