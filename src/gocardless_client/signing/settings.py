"""Configuração de assinatura de requisições (HTTP message signatures)."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING

from .errors import SigningConfigurationError
from .keys import load_private_key

if TYPE_CHECKING:
    from collections.abc import Callable

    from cryptography.hazmat.primitives.asymmetric import ec


def _new_nonce() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class RequestSigningSettings:
    """Chave e identificação usadas para assinar requisições.

    Attributes:
        private_key_pem: Chave privada EC em formato PEM
        public_key_id: Identificador da chave pública registrada (keyid)
        private_key_passphrase: Senha da chave (opcional)
        clock: Fonte de tempo (segundos desde epoch) para `created`
        nonce_factory: Gerador do nonce de uso único
    """

    private_key_pem: str
    public_key_id: str
    private_key_passphrase: str | None = None
    clock: Callable[[], float] = field(default=time.time, repr=False)
    nonce_factory: Callable[[], str] = field(default=_new_nonce, repr=False)

    @classmethod
    def for_tests(cls, private_key_pem: str, public_key_id: str) -> RequestSigningSettings:
        """Settings determinísticos: created=123 e nonce="nonce"."""
        return cls(
            private_key_pem=private_key_pem,
            public_key_id=public_key_id,
            clock=lambda: 123,
            nonce_factory=lambda: "nonce",
        )

    @cached_property
    def private_key(self) -> ec.EllipticCurvePrivateKey:
        """Chave carregada uma única vez e reutilizada em cada tentativa.

        Raises:
            SigningConfigurationError: Se o PEM for inválido ou não for EC
        """
        return load_private_key(self.private_key_pem, self.private_key_passphrase)

    def validate(self) -> list[str]:
        """Erros de configuração, incluindo PEM malformado ou chave não-EC."""
        errors: list[str] = []
        if not self.private_key_pem.strip():
            errors.append("GOCARDLESS_SIGNING_PRIVATE_KEY não configurado")
        else:
            try:
                self.private_key  # noqa: B018
            except SigningConfigurationError as exc:
                errors.append(f"GOCARDLESS_SIGNING_PRIVATE_KEY: {exc}")
        if not self.public_key_id.strip():
            errors.append("GOCARDLESS_SIGNING_KEY_ID não configurado")
        return errors
