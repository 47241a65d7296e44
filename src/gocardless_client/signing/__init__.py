"""Assinatura ECDSA de requisições (Gc-Signature / Gc-Signature-Input)."""

from .errors import RequestSigningError, SignatureVerificationError, SigningConfigurationError
from .keys import load_private_key, load_public_key
from .settings import RequestSigningSettings
from .signature import (
    CONTENT_DIGEST_HEADER,
    SIGNATURE_HEADER,
    SIGNATURE_INPUT_HEADER,
    RequestSigner,
    hash_with_sha256,
    sign_request,
    signature_params,
    verify_signature,
)

__all__ = [
    "CONTENT_DIGEST_HEADER",
    "SIGNATURE_HEADER",
    "SIGNATURE_INPUT_HEADER",
    "RequestSigner",
    "RequestSigningError",
    "RequestSigningSettings",
    "SignatureVerificationError",
    "SigningConfigurationError",
    "hash_with_sha256",
    "load_private_key",
    "load_public_key",
    "sign_request",
    "signature_params",
    "verify_signature",
]
