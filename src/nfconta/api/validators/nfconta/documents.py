"""Validação do envio de documentos para abertura da conta."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nfconta.api.validators.nfconta.rules import raise_if_violations

DOCUMENT_TYPES: tuple[str, ...] = (
    "SOCIAL_CONTRACT",
    "IDENTIFICATION",
    "ENTREPRENEUR_REQUIREMENT",
    "MINUTES_OF_CONSTITUTION",
    "MINUTES_OF_ELECTION",
    "ALLOW_BANK_ACCOUNT_DEPOSIT_STATEMENT",
    "IDENTIFICATION_ACCOUNT_OWNER",
)


def collect_document_violations(payload: Mapping[str, Any]) -> list[str]:
    documents = payload.get("documents")
    if not documents or not isinstance(documents, (list, tuple)):
        return [
            "Os documentos devem ser enviados em um campo chamado documents, "
            "e o mesmo deve ser uma lista"
        ]

    violations: list[str] = []
    for index, document in enumerate(documents):
        entry = document if isinstance(document, Mapping) else {}
        if "type" not in entry or entry["type"] is None:
            violations.append(f"O documento da posição {index} não possui o campo type")
        elif entry["type"] not in DOCUMENT_TYPES:
            violations.append(
                f"O campo type do documento da posição {index} deve ter um dos "
                f"seguintes valores: {', '.join(DOCUMENT_TYPES)}"
            )

        if "document" not in entry or entry["document"] is None:
            violations.append(f"O documento da posição {index} não possui o campo document")
    return violations


def validate_documents(payload: Mapping[str, Any]) -> None:
    """Valida a lista `documents` antes do envio.

    Raises:
        ValidationError: Com todas as violações encontradas.
    """
    raise_if_violations(collect_document_violations(payload), "submit_documents")
