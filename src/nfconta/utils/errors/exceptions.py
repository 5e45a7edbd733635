"""Exceções tipadas do cliente NFConta.

Três categorias, todas derivadas de NFContaError:
- ValidationError: payload inválido, levantada antes de qualquer chamada HTTP
- RemoteError: a API respondeu com mensagem/lista de erros de negócio
- TransportError: falha na camada HTTP (timeout, conexão, JSON inválido)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

# Separador usado pela API ao agregar mensagens
MESSAGE_SEPARATOR = "\r\n"


class NFContaError(Exception):
    """Base para todos os erros do cliente NFConta."""


class ValidationError(NFContaError):
    """Violação de campos obrigatórios detectada localmente.

    Todas as violações de uma operação são reunidas em uma única exceção.
    """

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations: tuple[str, ...] = tuple(violations)
        super().__init__(MESSAGE_SEPARATOR.join(self.violations))


class RemoteError(NFContaError):
    """Erro de negócio retornado pela API NFConta."""

    def __init__(
        self,
        message: str,
        *,
        http_code: int | None = None,
        errors: Iterable[str] = (),
        envelope: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_code = http_code
        self.errors: tuple[str, ...] = tuple(errors)
        self.envelope = envelope


class TransportError(NFContaError):
    """Falha de comunicação HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
