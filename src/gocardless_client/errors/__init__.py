"""Taxonomia de erros da API e classificação de respostas."""

from .classifier import (
    UNEXPECTED_RESPONSE_MESSAGE,
    classify_error,
    error_from_response,
    resolve_error_type,
)
from .exceptions import (
    ApiException,
    AuthenticationFailedException,
    GoCardlessException,
    InsufficientPermissionsException,
    InternalException,
    InvalidApiUsageException,
    InvalidSignatureException,
    InvalidStateException,
    RateLimitReachedException,
    UnexpectedResponseException,
    ValidationFailedException,
)
from .models import ApiError, ApiErrorResponse, ApiErrorType, Error

__all__ = [
    "UNEXPECTED_RESPONSE_MESSAGE",
    "ApiError",
    "ApiErrorResponse",
    "ApiErrorType",
    "ApiException",
    "AuthenticationFailedException",
    "Error",
    "GoCardlessException",
    "InsufficientPermissionsException",
    "InternalException",
    "InvalidApiUsageException",
    "InvalidSignatureException",
    "InvalidStateException",
    "RateLimitReachedException",
    "UnexpectedResponseException",
    "ValidationFailedException",
    "classify_error",
    "error_from_response",
    "resolve_error_type",
]
