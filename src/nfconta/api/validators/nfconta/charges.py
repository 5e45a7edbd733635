"""Validação de cobranças, depósitos e cobranças de contratação."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nfconta.api.validators.nfconta.rules import (
    collect_missing,
    is_empty,
    is_missing,
    raise_if_violations,
)

# Tipo de cobrança de contratação paga com cartão de crédito
CARD_CHARGE_TYPE = 2

_CHARGE_RULES = (
    ("customer_id", "O ID do cliente é obrigatório"),
    ("value", "O valor da cobrança é obrigatório"),
    ("due_date", "A data de vencimento da cobrança é obrigatória"),
)

_CHARGE_UPDATE_RULES = _CHARGE_RULES[1:]

_DEPOSIT_RULES = (
    ("value", "O valor do depósito é obrigatório"),
    ("due_date", "A data de vencimento do depósito é obrigatória"),
)

_CONTRACT_RULES = (
    ("customer_id", "Não é possível criar uma cobrança sem o ID do cliente"),
    ("total_value", "Não é possível criar uma cobrança sem o valor total da mesma"),
    ("due_date", "Não é possível criar uma cobrança sem a data de vencimento da mesma"),
)

_CARD_RULES = (
    ("parcel_value", "Não é possível criar uma cobrança por cartão sem o valor da parcela"),
    ("parcel_quantity", "Não é possível criar uma cobrança por cartão sem a quantidade de parcelas"),
    ("ip", "Não é possível criar uma cobrança por cartão sem o ip do cliente"),
)

_CREDIT_CARD_RULES = (
    ("name", "Não é possível criar uma cobrança por cartão sem o nome impresso no mesmo"),
    ("number", "Não é possível criar uma cobrança por cartão sem o número do mesmo"),
    ("expiry_month", "Não é possível criar uma cobrança por cartão sem o mês de expiração do mesmo"),
    ("expiry_year", "Não é possível criar uma cobrança por cartão sem o ano de expiração do mesmo"),
    ("ccv", "Não é possível criar uma cobrança por cartão sem o ccv do mesmo"),
)

_HOLDER_INFO_RULES = (
    ("name", "Não é possível criar uma cobrança por cartão sem o nome do titular"),
    ("cpfcnpj", "Não é possível criar uma cobrança por cartão sem o CPF/CNPJ do titular"),
    ("cep", "Não é possível criar uma cobrança por cartão sem o cep do titular"),
    ("address_number", "Não é possível criar uma cobrança por cartão sem o número do endereço do titular"),
    ("phone", "Não é possível criar uma cobrança por cartão sem o telefone fixo do titular"),
)


def validate_charge(payload: Mapping[str, Any]) -> None:
    raise_if_violations(collect_missing(payload, _CHARGE_RULES), "create_charge")


def validate_charge_update(payload: Mapping[str, Any]) -> None:
    raise_if_violations(collect_missing(payload, _CHARGE_UPDATE_RULES), "update_charge")


def validate_deposit(payload: Mapping[str, Any]) -> None:
    raise_if_violations(collect_missing(payload, _DEPOSIT_RULES), "create_deposit")


def is_card_charge(charge_type: Any) -> bool:
    """Aceita o tipo como inteiro ou string ("2")."""
    return charge_type == CARD_CHARGE_TYPE or charge_type == str(CARD_CHARGE_TYPE)


def _collect_nested(
    payload: Mapping[str, Any],
    field: str,
    missing_message: str,
    rules: tuple[tuple[str, str], ...],
) -> list[str]:
    if is_missing(payload, field):
        return [missing_message]
    return collect_missing(payload[field], rules)


def collect_contract_charge_violations(company_id: int, payload: Mapping[str, Any]) -> list[str]:
    violations: list[str] = []
    if is_empty(company_id):
        violations.append("Não é possível criar uma cobrança sem o ID da empresa")
    violations.extend(collect_missing(payload, _CONTRACT_RULES))

    if is_missing(payload, "type"):
        violations.append("Não é possível criar uma cobrança sem o tipo da mesma")
        return violations
    if not is_card_charge(payload["type"]):
        return violations

    violations.extend(collect_missing(payload, _CARD_RULES))
    violations.extend(
        _collect_nested(
            payload,
            "credit_card",
            "Não é possível criar uma cobrança por cartão sem as informações do mesmo",
            _CREDIT_CARD_RULES,
        )
    )
    violations.extend(
        _collect_nested(
            payload,
            "holder_info",
            "Não é possível criar uma cobrança por cartão sem as informações do titular",
            _HOLDER_INFO_RULES,
        )
    )
    return violations


def validate_contract_charge(company_id: int, payload: Mapping[str, Any]) -> None:
    """Valida cobrança de contratação; tipo 2 (cartão) exige cartão e titular completos.

    Raises:
        ValidationError: Com todas as violações encontradas.
    """
    raise_if_violations(
        collect_contract_charge_violations(company_id, payload),
        "create_contract_charge",
    )
