"""Cliente Python da API de pagamentos GoCardless.

Uso:
    from gocardless_client import GoCardlessClient, Environment

    async with GoCardlessClient.create("access-token", Environment.SANDBOX) as client:
        response = await client.mandates.get("MD123")
"""

from gocardless_client.client import GoCardlessClient
from gocardless_client.config.settings import ClientSettings, Environment
from gocardless_client.errors import (
    ApiErrorType,
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
from gocardless_client.http.constants import CLIENT_VERSION
from gocardless_client.http.request_settings import RequestSettings
from gocardless_client.signing import RequestSigningSettings
from gocardless_client.webhook import parse as parse_webhook

__version__ = CLIENT_VERSION

__all__ = [
    "ApiErrorType",
    "ApiException",
    "AuthenticationFailedException",
    "ClientSettings",
    "Environment",
    "GoCardlessClient",
    "GoCardlessException",
    "InsufficientPermissionsException",
    "InternalException",
    "InvalidApiUsageException",
    "InvalidSignatureException",
    "InvalidStateException",
    "RateLimitReachedException",
    "RequestSettings",
    "RequestSigningSettings",
    "UnexpectedResponseException",
    "ValidationFailedException",
    "__version__",
    "parse_webhook",
]
