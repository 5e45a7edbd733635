"""Builders de corpo multipart para envio de documentos."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def flatten_documents(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Achata a lista `documents` em campos indexados de formulário.

    {"documents": [{"type": "X", "document": f}]} vira
    {"documents[0][type]": "X", "documents[0][document]": f}.
    Demais campos do payload são preservados; a chave `documents` é removida.
    """
    flattened = {key: value for key, value in payload.items() if key != "documents"}
    for index, document in enumerate(payload.get("documents") or ()):
        flattened[f"documents[{index}][type]"] = document["type"]
        flattened[f"documents[{index}][document]"] = document["document"]
    return flattened


def is_file_part(value: Any) -> bool:
    """True para bytes, objetos com read() ou tuplas (filename, content[, mime])."""
    return isinstance(value, (bytes, bytearray, tuple)) or hasattr(value, "read")


def split_form_body(body: Mapping[str, Any] | None) -> tuple[dict[str, str], dict[str, Any]]:
    """Separa o corpo em campos simples (`data`) e arquivos (`files`) para o httpx."""
    data: dict[str, str] = {}
    files: dict[str, Any] = {}
    for key, value in (body or {}).items():
        if value is None:
            continue
        if is_file_part(value):
            files[key] = bytes(value) if isinstance(value, bytearray) else value
        elif isinstance(value, bool):
            data[key] = "1" if value else "0"
        else:
            data[key] = str(value)
    return data, files


def multipart_fields(body: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    """Monta as partes multipart/form-data para o httpx.

    Campos simples viram partes sem filename (`(None, valor)`), então o corpo
    é sempre multipart, mesmo sem nenhum arquivo.
    """
    data, files = split_form_body(body)
    fields: list[tuple[str, Any]] = [(key, (None, value)) for key, value in data.items()]
    fields.extend(files.items())
    return fields
