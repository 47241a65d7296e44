"""Webhooks: verificação HMAC e parsing de eventos."""

from .receive import SIGNATURE_HEADER, parse
from .signature import compute_webhook_signature, validate_webhook_signature

__all__ = [
    "SIGNATURE_HEADER",
    "compute_webhook_signature",
    "parse",
    "validate_webhook_signature",
]
