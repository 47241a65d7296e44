"""Validação de assinatura HMAC-SHA256 de webhooks."""

from __future__ import annotations

import hashlib
import hmac


def compute_webhook_signature(body: bytes, secret: str) -> str:
    """HMAC-SHA256 do corpo bruto, em hex minúsculo."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def validate_webhook_signature(body: bytes, signature: str, secret: str) -> bool:
    """Valida o cabeçalho Webhook-Signature contra o corpo bruto.

    Args:
        body: Corpo bruto da requisição
        signature: Valor do cabeçalho de assinatura (hex)
        secret: Secret do endpoint de webhook

    Returns:
        True se assinatura válida
    """
    computed = compute_webhook_signature(body, secret)
    return hmac.compare_digest(computed.encode("ascii"), signature.encode("utf-8"))
