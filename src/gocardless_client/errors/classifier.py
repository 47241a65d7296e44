"""Classificação de respostas de erro em exceções tipadas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from gocardless_client.errors.exceptions import (
    ApiException,
    AuthenticationFailedException,
    InsufficientPermissionsException,
    InternalException,
    InvalidApiUsageException,
    InvalidStateException,
    RateLimitReachedException,
    UnexpectedResponseException,
    ValidationFailedException,
)
from gocardless_client.errors.models import ApiError, ApiErrorResponse, ApiErrorType

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE_MESSAGE = (
    "Something went wrong with this request. "
    "Please check the response_message attribute."
)

# Status que prevalecem sobre o `type` declarado pelo servidor
_STATUS_TYPE_OVERRIDES: dict[int, ApiErrorType] = {
    401: ApiErrorType.AUTHENTICATION_FAILED,
    403: ApiErrorType.INSUFFICIENT_PERMISSIONS,
    429: ApiErrorType.RATE_LIMIT_REACHED,
}

_EXCEPTION_BY_TYPE: dict[ApiErrorType, type[ApiException]] = {
    ApiErrorType.AUTHENTICATION_FAILED: AuthenticationFailedException,
    ApiErrorType.INSUFFICIENT_PERMISSIONS: InsufficientPermissionsException,
    ApiErrorType.RATE_LIMIT_REACHED: RateLimitReachedException,
    ApiErrorType.INVALID_API_USAGE: InvalidApiUsageException,
    ApiErrorType.INVALID_STATE: InvalidStateException,
    ApiErrorType.VALIDATION_FAILED: ValidationFailedException,
    ApiErrorType.GOCARDLESS: InternalException,
}


def resolve_error_type(status_code: int, declared_type: str) -> ApiErrorType:
    """Determina o ApiErrorType efetivo.

    401/403/429 sempre vencem. Tipos desconhecidos caem em
    `gocardless` (5xx) ou `invalid_api_usage` (demais).
    """
    override = _STATUS_TYPE_OVERRIDES.get(status_code)
    if override is not None:
        return override
    try:
        return ApiErrorType(declared_type)
    except ValueError:
        if status_code >= 500:
            return ApiErrorType.GOCARDLESS
        return ApiErrorType.INVALID_API_USAGE


def classify_error(
    status_code: int,
    error_response: ApiErrorResponse,
) -> ApiException:
    """Mapeia um corpo de erro decodificado para a exceção tipada.

    Args:
        status_code: Status HTTP da resposta
        error_response: Corpo de erro já decodificado

    Returns:
        Exceção correspondente (não levantada).
    """
    error = error_response.error
    error_type = resolve_error_type(status_code, error.type)
    error.type = error_type.value
    if not error.code:
        error.code = status_code

    exception_cls = _EXCEPTION_BY_TYPE[error_type]
    logger.info(
        "api_error_classified",
        extra={
            "status_code": status_code,
            "error_type": error_type.value,
            "request_id": error.request_id,
        },
    )
    return exception_cls(error_response)


def unexpected_response_error(response: httpx.Response) -> UnexpectedResponseException:
    """Exceção genérica para corpo de erro não decodificável."""
    error_response = ApiErrorResponse(
        error=ApiError(
            code=response.status_code,
            type=ApiErrorType.GOCARDLESS.value,
            message=UNEXPECTED_RESPONSE_MESSAGE,
        )
    ).attach_response(response)
    return UnexpectedResponseException(error_response)


def error_from_response(response: httpx.Response) -> ApiException:
    """Decodifica e classifica uma resposta 4xx/5xx.

    Campos `null` do envelope valem como vazios e não impedem a
    classificação. Falhas de decodificação nunca escapam como erro de
    desserialização: viram UnexpectedResponseException com a resposta
    bruta anexada.
    """
    try:
        error_response = ApiErrorResponse.model_validate_json(response.content)
    except ValidationError:
        logger.warning(
            "api_error_body_undecodable",
            extra={"status_code": response.status_code},
        )
        return unexpected_response_error(response)

    error_response.attach_response(response)
    return classify_error(response.status_code, error_response)
