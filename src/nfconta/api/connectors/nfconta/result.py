"""Resultado tipado de uma operação NFConta.

Alternativa ao try/except no chamador: `capture` executa a operação e
devolve o envelope ou o erro tipado em um único objeto.

Uso:
    result = capture(client.create_charge, 10, payload)
    if not result.ok:
        logger.warning("charge_failed", extra={"error_type": result.error_type})
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from nfconta.utils.errors import NFContaError

if TYPE_CHECKING:
    from collections.abc import Callable

    from nfconta.app.protocols.models import ResponseEnvelope


@dataclass(frozen=True)
class OperationResult:
    """Envelope de sucesso ou erro (ValidationError, RemoteError, TransportError)."""

    envelope: ResponseEnvelope | None = None
    error: NFContaError | None = None

    def __post_init__(self) -> None:
        if (self.envelope is None) == (self.error is None):
            msg = "OperationResult exige exatamente um entre envelope e error"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_type(self) -> str | None:
        return type(self.error).__name__ if self.error is not None else None

    def unwrap(self) -> ResponseEnvelope:
        """Retorna o envelope ou levanta o erro guardado.

        Raises:
            NFContaError: O erro capturado na operação
        """
        if self.envelope is None:
            raise self.error
        return self.envelope


def capture(
    operation: Callable[..., ResponseEnvelope],
    *args: Any,
    **kwargs: Any,
) -> OperationResult:
    """Executa `operation` e captura apenas erros NFContaError."""
    try:
        return OperationResult(envelope=operation(*args, **kwargs))
    except NFContaError as exc:
        return OperationResult(error=exc)
