"""Modelos do corpo de erro retornado pela API GoCardless.

Formato consumido:
    {"error": {"code": 422, "type": "validation_failed", "message": "...",
               "request_id": "...", "documentation_url": "...",
               "errors": [{"reason": "...", "message": "...", "field": "...",
                           "request_pointer": "...", "links": {"rel": "id"}}]}}
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationInfo, field_validator


class ApiErrorType(StrEnum):
    """Categorias de erro declaradas pela API (campo `type`)."""

    AUTHENTICATION_FAILED = "authentication_failed"
    # Erro interno da plataforma; deve ser reportado ao suporte com o request_id
    GOCARDLESS = "gocardless"
    INVALID_API_USAGE = "invalid_api_usage"
    INVALID_STATE = "invalid_state"
    VALIDATION_FAILED = "validation_failed"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    RATE_LIMIT_REACHED = "rate_limit_reached"


class Error(BaseModel):
    """Sub-erro (razão/campo) dentro de uma resposta de erro."""

    model_config = ConfigDict(extra="ignore")

    reason: str | None = None
    message: str | None = None
    field: str | None = None
    request_pointer: str | None = None
    links: dict[str, str] = Field(default_factory=dict)

    @field_validator("links", mode="before")
    @classmethod
    def drop_null_links(cls, value: Any) -> Any:
        """Links nulos no wire são descartados."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {rel: target for rel, target in value.items() if target is not None}
        return value


# Campos do envelope em que `null` equivale ao valor vazio
_NULL_DEFAULTS: dict[str, Any] = {
    "code": int,
    "type": str,
    "message": str,
    "errors": list,
}


class ApiError(BaseModel):
    """Conteúdo do envelope `error`.

    `type` é mantido como string no wire; o classificador o normaliza
    para um valor de ApiErrorType.
    """

    model_config = ConfigDict(extra="ignore")

    code: int = 0
    type: str = ""
    message: str = ""
    request_id: str | None = None
    documentation_url: str | None = None
    errors: list[Error] = Field(default_factory=list)

    @field_validator("code", "type", "message", "errors", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """`null` no wire vira o default do campo, sem invalidar o corpo."""
        if value is not None:
            return value
        return _NULL_DEFAULTS[info.field_name]()


class ApiErrorResponse(BaseModel):
    """Resposta de erro completa, com a resposta HTTP bruta anexada."""

    model_config = ConfigDict(extra="ignore")

    error: ApiError

    _response_message: httpx.Response | None = PrivateAttr(default=None)

    @property
    def response_message(self) -> httpx.Response | None:
        """Resposta HTTP que originou o erro."""
        return self._response_message

    def attach_response(self, response: httpx.Response) -> ApiErrorResponse:
        self._response_message = response
        return self
