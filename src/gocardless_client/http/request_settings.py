"""Ajustes por chamada aplicados pelo executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


@dataclass(frozen=True)
class RequestSettings:
    """Sobrescritas de uma chamada lógica.

    Attributes:
        headers: Cabeçalhos que substituem (não mesclam) os padrões de mesmo nome
        customise_request: Hook chamado por último em cada tentativa, com a
            requisição já montada e assinada
        number_of_retries: Tentativas extras em timeout/falha de conexão;
            None usa ClientSettings.number_of_retries
        wait_between_retries: Espera (segundos) entre tentativas; None usa
            ClientSettings.wait_between_retries_seconds
        timeout: Limite (segundos) da chamada lógica inteira, incluindo
            retries; ao expirar a chamada é cancelada sem nova tentativa
    """

    headers: dict[str, str] = field(default_factory=dict)
    customise_request: Callable[[httpx.Request], None] | None = None
    number_of_retries: int | None = None
    wait_between_retries: float | None = None
    timeout: float | None = None
