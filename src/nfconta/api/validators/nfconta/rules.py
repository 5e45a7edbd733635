"""Regras básicas de presença de campos.

Um valor é considerado ausente quando não existe ou é "vazio":
None, False, zero numérico (int, float, Decimal), "" ou coleção vazia.
A string "0" é um valor válido (ex: dígito verificador de conta).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sized
from numbers import Number
from typing import TYPE_CHECKING, Any

from nfconta.utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Retorna True quando o valor conta como não informado."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_missing(payload: Any, field: str) -> bool:
    """True se `payload` não é um mapping ou não traz `field` preenchido."""
    if not isinstance(payload, Mapping):
        return True
    return is_empty(payload.get(field))


def collect_missing(
    payload: Any,
    rules: Iterable[tuple[str, str]],
) -> list[str]:
    """Aplica pares (campo, mensagem) e devolve as mensagens dos campos ausentes."""
    return [message for field, message in rules if is_missing(payload, field)]


def raise_if_violations(violations: list[str], operation: str) -> None:
    """Levanta ValidationError com todas as violações, se houver alguma.

    Raises:
        ValidationError: Se a lista não estiver vazia.
    """
    if not violations:
        return
    logger.info(
        "nfconta_validation_failed",
        extra={"operation": operation, "violation_count": len(violations)},
    )
    raise ValidationError(violations)
