"""Exceções compartilhadas do cliente NFConta."""

from .exceptions import (
    MESSAGE_SEPARATOR,
    NFContaError,
    RemoteError,
    TransportError,
    ValidationError,
)

__all__ = [
    "MESSAGE_SEPARATOR",
    "NFContaError",
    "RemoteError",
    "TransportError",
    "ValidationError",
]
