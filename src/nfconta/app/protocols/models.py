"""Contratos de dados trocados entre o facade NFConta e o transporte HTTP."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

# Lista ordenada de pares {"name": ..., "value": ...}
QueryParams = list[dict[str, Any]]


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Configuração por requisição.

    Attributes:
        decode: Decodifica o corpo da resposta como JSON. Com False o corpo
            é devolvido como bytes (ex: PDF do boleto), exceto quando a
            resposta declara Content-Type JSON (erros da API).
        form: Envia o corpo como multipart/form-data em vez de JSON.
    """

    decode: bool = True
    form: bool = False


DEFAULT_OPTIONS = RequestOptions()


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Resposta da API: status HTTP e corpo (decodificado ou bruto)."""

    http_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return self.http_code == 200

    @property
    def message(self) -> str | None:
        """Campo `message` do corpo, quando presente e não nulo."""
        if isinstance(self.body, Mapping):
            value = self.body.get("message")
            if value is not None:
                return str(value)
        return None

    @property
    def errors(self) -> tuple[str, ...]:
        """Lista `errors` do corpo, normalizada para tupla de strings."""
        if not isinstance(self.body, Mapping):
            return ()
        raw = self.body.get("errors")
        if raw is None:
            return ()
        if isinstance(raw, str):
            return (raw,)
        if isinstance(raw, Mapping):
            raw = raw.values()
        if not isinstance(raw, Iterable):
            return (str(raw),)
        return tuple(str(item) for item in raw)
