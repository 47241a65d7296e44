"""Carregamento de chaves EC em formato PEM."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .errors import SigningConfigurationError


def load_private_key(
    private_key_pem: str,
    passphrase: str | None = None,
) -> ec.EllipticCurvePrivateKey:
    """Carrega chave privada EC em formato PEM.

    Args:
        private_key_pem: Chave privada em formato PEM
        passphrase: Senha da chave (opcional)

    Returns:
        Chave privada de curva elíptica

    Raises:
        SigningConfigurationError: Se o PEM for inválido ou a chave não for EC
    """
    passphrase_bytes = passphrase.encode() if passphrase and passphrase.strip() else None
    try:
        key = serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=passphrase_bytes,
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SigningConfigurationError(
            f"Chave privada de assinatura inválida (PEM malformado?): {exc}"
        ) from exc

    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise SigningConfigurationError(
            "Chave privada de assinatura deve ser de curva elíptica (ECDSA)"
        )
    return key


def load_public_key(public_key_pem: str) -> ec.EllipticCurvePublicKey:
    """Carrega chave pública EC em formato PEM.

    Raises:
        SigningConfigurationError: Se o PEM for inválido ou a chave não for EC
    """
    try:
        key = serialization.load_pem_public_key(public_key_pem.encode("utf-8"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise SigningConfigurationError(f"Chave pública inválida: {exc}") from exc

    if not isinstance(key, ec.EllipticCurvePublicKey):
        raise SigningConfigurationError("Chave pública deve ser de curva elíptica (ECDSA)")
    return key
