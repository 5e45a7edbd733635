"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id é enviado à API no header X-Correlation-ID e injetado em logs.
Usa ContextVar para ser thread-safe.

Uso:
    from nfconta.app.observability import set_correlation_id, reset_correlation_id

    token = set_correlation_id("pedido-123")
    try:
        client.get_balance(company_id)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("nfconta_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
