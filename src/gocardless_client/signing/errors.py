"""Erros de assinatura de requisições."""

from gocardless_client.errors.exceptions import GoCardlessException


class RequestSigningError(GoCardlessException):
    """Base para falhas de assinatura de requisição."""


class SigningConfigurationError(RequestSigningError):
    """Configuração de assinatura inválida (PEM malformado, chave não-EC)."""


class SignatureVerificationError(RequestSigningError):
    """Assinatura não confere com o signature base informado."""
