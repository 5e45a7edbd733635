"""Classificação das respostas da API NFConta.

A API não sinaliza erro de forma uniforme. Cada operação usa uma política:

- MESSAGE: `message` não nulo no corpo indica erro, qualquer que seja o status
- HTTP_STATUS: só status 200 é sucesso; erro usa `message`, senão `errors`
- RAW: o envelope é devolvido sem inspeção
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from nfconta.utils.errors import MESSAGE_SEPARATOR, RemoteError

if TYPE_CHECKING:
    from nfconta.app.protocols.models import ResponseEnvelope


class ResponsePolicy(Enum):
    """Como detectar falha no envelope de resposta."""

    MESSAGE = "message"
    HTTP_STATUS = "http_status"
    RAW = "raw"


def _status_error_message(envelope: ResponseEnvelope) -> str:
    if envelope.message is not None:
        return envelope.message
    if envelope.errors:
        return MESSAGE_SEPARATOR.join(envelope.errors)
    return f"A API NFConta respondeu com status {envelope.http_code}"


def classify_response(
    envelope: ResponseEnvelope,
    policy: ResponsePolicy,
) -> RemoteError | None:
    """Retorna o RemoteError correspondente ao envelope, ou None em caso de sucesso.

    Args:
        envelope: Resposta já decodificada pelo transporte
        policy: Política de detecção de erro da operação

    Returns:
        RemoteError (não levantado) ou None
    """
    if policy is ResponsePolicy.RAW:
        return None

    if policy is ResponsePolicy.MESSAGE:
        if envelope.message is None:
            return None
        message = envelope.message
    else:
        if envelope.ok:
            return None
        message = _status_error_message(envelope)

    return RemoteError(
        message,
        http_code=envelope.http_code,
        errors=envelope.errors,
        envelope=envelope,
    )
