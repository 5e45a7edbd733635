"""Validação de pagamentos de contas e transferências."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nfconta.api.validators.nfconta.rules import collect_missing, is_missing, raise_if_violations

_TOKEN_MESSAGE = "Informe o token gerado no app do Google Authenticator"

_PAYMENT_RULES = (
    ("code", "Informe a linha digitável do boleto para poder realizar o pagamento"),
    ("token", _TOKEN_MESSAGE),
)

_TRANSFER_RULES = (
    ("value", "Informe o valor da transferência"),
    ("token", _TOKEN_MESSAGE),
    ("bank_id", "Informe o código do banco"),
    ("name", "Informe o nome do titular da conta"),
    ("cpfcnpj", "Informe o CPF/CNPJ do titular da conta"),
    ("agency", "Informe o número da agência"),
    ("account", "Informe o número da conta bancária"),
    ("account_digit", "Informe o dígito verificador da conta bancária"),
    ("bank_type", "Informe o tipo de conta bancária"),
)


def validate_payment_simulation(payload: Mapping[str, Any]) -> None:
    """Exige a linha digitável (`code`) ou o código de barras (`bar_code`)."""
    violations: list[str] = []
    if is_missing(payload, "code") and is_missing(payload, "bar_code"):
        violations.append(
            "Informe a linha digitável ou o código de barras do boleto "
            "para poder realizar a simulação"
        )
    raise_if_violations(violations, "simulate_payment")


def validate_payment(payload: Mapping[str, Any]) -> None:
    raise_if_violations(collect_missing(payload, _PAYMENT_RULES), "create_payment")


def validate_transfer(payload: Mapping[str, Any]) -> None:
    raise_if_violations(collect_missing(payload, _TRANSFER_RULES), "transfer")
