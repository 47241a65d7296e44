"""Montagem de path e query string a partir de objetos de requisição.

Cada tipo de requisição declara explicitamente seus parâmetros de query
(`query_params`), na ordem em que devem aparecer. Objetos aninhados são
achatados em notação `pai[filho]`, recursivamente.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote


@dataclass(frozen=True)
class QueryParam:
    """Parâmetro de query declarado por um tipo de requisição.

    Attributes:
        name: Nome do parâmetro no wire
        accessor: Função que extrai o valor do objeto de requisição
        nested: True se o valor é outro objeto com `query_params` próprios
    """

    name: str
    accessor: Callable[[Any], Any]
    nested: bool = False


def query_param(name: str, *, attribute: str | None = None, nested: bool = False) -> QueryParam:
    """Atalho para QueryParam lido de um atributo homônimo."""
    return QueryParam(name=name, accessor=operator.attrgetter(attribute or name), nested=nested)


def stringify(value: Any) -> str:
    """Converte um valor para sua forma textual no wire (sem encoding)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return stringify(value.value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, list | tuple):
        return ",".join(stringify(item) for item in value)
    return str(value)


def _encode(value: str) -> str:
    return quote(value, safe="")


def _nest_key(parent: str, inner_key: str) -> str:
    head, bracket, rest = inner_key.partition("[")
    return f"{parent}[{head}]{bracket}{rest}"


def extract_query_values(obj: Any) -> list[tuple[str, Any]]:
    """Lista ordenada (chave, valor) dos parâmetros não nulos de `obj`."""
    if obj is None:
        return []

    args: list[tuple[str, Any]] = []
    for param in getattr(obj, "query_params", ()):
        value = param.accessor(obj)
        if value is None:
            continue
        if param.nested:
            args.extend(
                (_nest_key(param.name, inner_key), inner_value)
                for inner_key, inner_value in extract_query_values(value)
            )
        else:
            args.append((param.name, value))
    return args


def build_query_string(obj: Any) -> str:
    """Query string (sem `?`) com chave e valor codificados separadamente."""
    return "&".join(
        f"{quote(key, safe='[]')}={_encode(stringify(value))}"
        for key, value in extract_query_values(obj)
    )


def substitute_path(template: str, url_params: Sequence[tuple[str, Any]]) -> str:
    """Substitui placeholders `:nome` do template pelos valores codificados."""
    path = template
    for name, value in url_params:
        encoded = _encode(stringify(value))
        path = re.sub(rf":{re.escape(name)}\b", lambda _match: encoded, path)
    return path
