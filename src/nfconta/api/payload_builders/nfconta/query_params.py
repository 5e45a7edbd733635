"""Builders de query params no formato lista de pares {name, value}."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import QueryParams


def set_param(params: Iterable[Mapping[str, Any]] | None, name: str, value: Any) -> QueryParams:
    """Remove entradas anteriores de `name` e adiciona o valor atual ao final.

    A lista recebida não é alterada; a ordem das demais entradas é mantida.
    """
    result = [dict(item) for item in (params or ()) if item.get("name") != name]
    result.append({"name": name, "value": value})
    return result


def set_param_if_present(
    params: Iterable[Mapping[str, Any]] | None,
    name: str,
    value: Any,
) -> QueryParams:
    """Como set_param, mas só mexe na lista quando `value` não é vazio.

    Com valor vazio, a lista é devolvida como cópia sem alterações.
    """
    if not value:
        return [dict(item) for item in (params or ())]
    return set_param(params, name, value)


def with_company_id(params: Iterable[Mapping[str, Any]] | None, company_id: int) -> QueryParams:
    """Descarta qualquer company_id anterior e adiciona o atual quando informado."""
    filtered = [dict(item) for item in (params or ()) if item.get("name") != "company_id"]
    if company_id:
        filtered.append({"name": "company_id", "value": company_id})
    return filtered


def to_httpx_params(params: Iterable[Mapping[str, Any]] | None) -> list[tuple[str, str]]:
    """Converte a lista {name, value} em tuplas aceitas pelo httpx, preservando a ordem."""
    pairs: list[tuple[str, str]] = []
    for item in params or ():
        value = item.get("value")
        if value is None:
            continue
        if isinstance(value, bool):
            value = int(value)
        pairs.append((str(item["name"]), str(value)))
    return pairs
