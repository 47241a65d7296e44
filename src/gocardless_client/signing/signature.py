"""Assinatura de requisições com HTTP message signatures (ECDSA/SHA-512).

O signature base é reconstruído pelo servidor a partir dos mesmos
componentes; qualquer diferença de ordem, espaço ou caixa invalida a
assinatura. Componentes assinados, nesta ordem:

    "@method", "@authority", "@request-target"
    + "content-digest", "content-type", "content-length"   (só com corpo)
"""

from __future__ import annotations

import base64
import binascii
import hashlib
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .errors import SignatureVerificationError
from .keys import load_private_key, load_public_key

if TYPE_CHECKING:
    import httpx

    from .settings import RequestSigningSettings

DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"

SIGNATURE_HEADER = "Gc-Signature"
SIGNATURE_INPUT_HEADER = "Gc-Signature-Input"
CONTENT_DIGEST_HEADER = "Content-Digest"

_BASE_COMPONENTS = ('"@method"', '"@authority"', '"@request-target"')
_CONTENT_COMPONENTS = ('"content-digest"', '"content-type"', '"content-length"')


def hash_with_sha256(content: str) -> str:
    """Base64 do SHA-256 dos bytes UTF-8 do conteúdo."""
    digest = hashlib.sha256(content.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def signature_params(key_id: str, created: str, nonce: str, include_content: bool) -> str:
    components = _BASE_COMPONENTS + (_CONTENT_COMPONENTS if include_content else ())
    return f'({" ".join(components)});keyid="{key_id}";created={created};nonce="{nonce}"'


class RequestSigner:
    """Calcula signature base, assinatura e cabeçalhos de uma requisição.

    `created` e `nonce` são gerados pelo chamador (ver RequestSigningSettings)
    e podem ser fixados para tornar a assinatura reproduzível. Uma chave já
    carregada (`private_key`) dispensa o parse do PEM.
    """

    def __init__(
        self,
        *,
        private_key_pem: str = "",
        http_method: str,
        host: str,
        request_path: str,
        key_id: str,
        created: str,
        nonce: str,
        content_digest: str | None = None,
        content_length: int | None = None,
        content_type: str = DEFAULT_CONTENT_TYPE,
        private_key_passphrase: str | None = None,
        private_key: ec.EllipticCurvePrivateKey | None = None,
    ) -> None:
        include_content = content_digest is not None
        self.signature_input = signature_params(key_id, created, nonce, include_content)
        self.signature_base = _build_signature_base(
            http_method=http_method,
            host=host,
            request_path=request_path,
            content_digest=content_digest,
            content_type=content_type,
            content_length=content_length,
            params=self.signature_input,
        )
        if private_key is None:
            private_key = load_private_key(private_key_pem, private_key_passphrase)
        self.signature = _sign(private_key, self.signature_base)

    @property
    def gc_signature(self) -> str:
        return f"sig-1=:{self.signature}:"

    @property
    def gc_signature_input(self) -> str:
        return f"sig-1={self.signature_input}"


def _build_signature_base(
    *,
    http_method: str,
    host: str,
    request_path: str,
    content_digest: str | None,
    content_type: str,
    content_length: int | None,
    params: str,
) -> str:
    lines = [
        f'"@method": {http_method}',
        f'"@authority": {host}',
        f'"@request-target": {request_path}',
    ]
    if content_digest is not None:
        lines.extend(
            [
                f'"content-digest": sha256=:{content_digest}:',
                f'"content-type": {content_type}',
                f'"content-length": {content_length}',
            ]
        )
    lines.append(f'"@signature-params": {params}')
    return "\n".join(lines)


def _sign(private_key: ec.EllipticCurvePrivateKey, message: str) -> str:
    signature = private_key.sign(message.encode("utf-8"), ec.ECDSA(hashes.SHA512()))
    return base64.b64encode(signature).decode("ascii")


def verify_signature(public_key_pem: str, signature: str, signature_base: str) -> None:
    """Verifica assinatura ECDSA/SHA-512 sobre o signature base.

    Args:
        public_key_pem: Chave pública EC (PEM)
        signature: Assinatura em base64 (sem o envelope `sig-1=:...:`)
        signature_base: Texto que foi assinado

    Raises:
        SignatureVerificationError: Se a assinatura não conferir
        SigningConfigurationError: Se a chave pública for inválida
    """
    public_key = load_public_key(public_key_pem)
    try:
        signature_bytes = base64.b64decode(signature, validate=True)
        public_key.verify(
            signature_bytes,
            signature_base.encode("utf-8"),
            ec.ECDSA(hashes.SHA512()),
        )
    except (InvalidSignature, binascii.Error, ValueError) as exc:
        raise SignatureVerificationError("Signature verification failed") from exc


def sign_request(
    request: httpx.Request,
    signing_settings: RequestSigningSettings | None,
    content: str | None,
) -> None:
    """Adiciona Gc-Signature, Gc-Signature-Input e Content-Digest à requisição.

    No-op quando não há configuração de assinatura.

    Args:
        request: Requisição já montada (URL final e cabeçalhos)
        signing_settings: Chave e keyid; None desativa a assinatura
        content: Corpo textual da requisição, se houver
    """
    if signing_settings is None:
        return

    content_digest: str | None = None
    content_length: int | None = None
    if content is not None:
        content_digest = hash_with_sha256(content)
        content_length = len(content.encode("utf-8"))

    signer = RequestSigner(
        private_key=signing_settings.private_key,
        http_method=request.method,
        host=request.url.host,
        request_path=request.url.raw_path.decode("ascii"),
        key_id=signing_settings.public_key_id,
        created=str(int(signing_settings.clock())),
        nonce=signing_settings.nonce_factory(),
        content_digest=content_digest,
        content_length=content_length,
        content_type=request.headers.get("Content-Type", DEFAULT_CONTENT_TYPE),
    )

    request.headers[SIGNATURE_HEADER] = signer.gc_signature
    request.headers[SIGNATURE_INPUT_HEADER] = signer.gc_signature_input
    if content_digest is not None:
        request.headers[CONTENT_DIGEST_HEADER] = f"sha256=:{content_digest}:"
