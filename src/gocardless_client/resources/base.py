"""Bases dos DTOs de requisição e resposta.

Requisições declaram seus parâmetros de query em `query_params` e, quando
criam recursos, herdam de IdempotentRequest. Respostas carregam a
resposta HTTP bruta em `response_message`.
"""

from __future__ import annotations

from typing import Any, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from gocardless_client.http.query_string import QueryParam


class ApiRequest(BaseModel):
    """Base de objetos de requisição."""

    model_config = ConfigDict(extra="forbid")

    query_params: ClassVar[tuple[QueryParam, ...]] = ()
    requires_idempotency_key: ClassVar[bool] = False

    def to_payload(self) -> dict[str, Any]:
        """Corpo JSON da requisição (campos nulos omitidos)."""
        return self.model_dump(mode="json", exclude_none=True)


class IdempotentRequest(ApiRequest):
    """Requisição de criação que exige Idempotency-Key.

    Se `idempotency_key` não for informada, o executor gera uma por
    chamada lógica. A chave nunca vai no corpo.
    """

    requires_idempotency_key: ClassVar[bool] = True

    idempotency_key: str | None = Field(default=None, exclude=True)


class ApiResponse(BaseModel):
    """Base das respostas tipadas."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    _response_message: httpx.Response | None = PrivateAttr(default=None)

    @property
    def response_message(self) -> httpx.Response | None:
        """Resposta HTTP bruta que originou este objeto."""
        return self._response_message

    def attach_response(self, response: httpx.Response) -> None:
        self._response_message = response


class Cursors(BaseModel):
    model_config = ConfigDict(extra="ignore")

    before: str | None = None
    after: str | None = None


class ListMeta(BaseModel):
    """Metadados de paginação de respostas de listagem."""

    model_config = ConfigDict(extra="ignore")

    cursors: Cursors = Field(default_factory=Cursors)
    limit: int | None = None
