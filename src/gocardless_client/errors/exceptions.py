"""Hierarquia de exceções do cliente.

Uma exceção por ApiErrorType, todas derivadas de ApiException. Cada uma
carrega o ApiErrorResponse decodificado e a resposta HTTP bruta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gocardless_client.errors.models import ApiErrorType

if TYPE_CHECKING:
    import httpx

    from gocardless_client.errors.models import ApiErrorResponse, Error


class GoCardlessException(Exception):
    """Base para exceções da biblioteca."""


class ApiException(GoCardlessException):
    """Base para exceções originadas de respostas de erro da API."""

    def __init__(self, api_error_response: ApiErrorResponse) -> None:
        super().__init__(api_error_response.error.message)
        self.api_error_response = api_error_response

    @property
    def response_message(self) -> httpx.Response | None:
        """Resposta HTTP bruta, para inspeção pelo integrador."""
        return self.api_error_response.response_message

    @property
    def type(self) -> ApiErrorType:
        return ApiErrorType(self.api_error_response.error.type)

    @property
    def message(self) -> str:
        return self.api_error_response.error.message

    @property
    def code(self) -> int:
        """Status HTTP do erro."""
        return self.api_error_response.error.code

    @property
    def request_id(self) -> str | None:
        """ID da requisição; ajuda o suporte a localizar o erro."""
        return self.api_error_response.error.request_id

    @property
    def documentation_url(self) -> str | None:
        return self.api_error_response.error.documentation_url

    @property
    def errors(self) -> list[Error]:
        """Sub-erros por razão/campo."""
        return list(self.api_error_response.error.errors)


class AuthenticationFailedException(ApiException):
    """Falha de autenticação (401)."""


class InsufficientPermissionsException(ApiException):
    """Permissões insuficientes para a operação (403)."""


class RateLimitReachedException(ApiException):
    """Limite de requisições atingido (429)."""


class InvalidApiUsageException(ApiException):
    """Uso inválido da API (URL, cabeçalhos, sintaxe)."""


class InvalidStateException(ApiException):
    """Ação inválida para o estado atual do recurso.

    Inclui o conflito de criação idempotente (`idempotent_creation_conflict`).
    """


class ValidationFailedException(ApiException):
    """Parâmetros inválidos; `errors` traz field/request_pointer de cada falha."""


class InternalException(ApiException):
    """Erro interno da plataforma com corpo estruturado."""


class UnexpectedResponseException(ApiException):
    """Corpo de erro não decodificável (ex: página HTML de um proxy).

    Só expõe a resposta bruta e uma mensagem fixa.
    """


class InvalidSignatureException(GoCardlessException):
    """Assinatura do webhook não confere com o HMAC do corpo."""

    def __init__(self, message: str = "invalid_signature") -> None:
        super().__init__(message)
