"""Settings do cliente GoCardless.

Configuração imutável passada ao executor na construção; RequestSettings
por chamada funciona como camada de sobrescrita.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from gocardless_client.signing.settings import RequestSigningSettings

# Versão da API enviada em GoCardless-Version
API_VERSION: str = "2015-07-06"

LIVE_BASE_URL: str = "https://api.gocardless.com"
SANDBOX_BASE_URL: str = "https://api-sandbox.gocardless.com"


class Environment(StrEnum):
    """Ambientes disponíveis para o cliente."""

    LIVE = "live"
    SANDBOX = "sandbox"


_BASE_URLS: dict[Environment, str] = {
    Environment.LIVE: LIVE_BASE_URL,
    Environment.SANDBOX: SANDBOX_BASE_URL,
}


@dataclass(frozen=True)
class ClientSettings:
    """Configurações do cliente.

    Attributes:
        access_token: Token Bearer de acesso à API
        environment: Ambiente (live|sandbox), define a URL base padrão
        base_url: URL base customizada; vazia usa a do ambiente
        api_version: Versão da API (GoCardless-Version)
        number_of_retries: Tentativas extras em timeout/falha de conexão
        wait_between_retries_seconds: Espera entre tentativas
        request_timeout_seconds: Timeout do transporte HTTP por tentativa
        error_on_idempotency_conflict: Levanta InvalidStateException em vez de
            buscar o recurso já criado
        signing: Chave para assinatura de requisições (None = sem assinatura)
        webhook_secret: Secret para validação HMAC de webhooks
    """

    access_token: str = ""
    environment: Environment = Environment.LIVE
    base_url: str = ""
    api_version: str = API_VERSION

    # Timeouts e retries
    number_of_retries: int = 2
    wait_between_retries_seconds: float = 0.5
    request_timeout_seconds: float = 30.0

    error_on_idempotency_conflict: bool = False
    signing: RequestSigningSettings | None = None
    webhook_secret: str = ""

    @property
    def api_base_url(self) -> str:
        """URL base efetiva, sem barra final."""
        return (self.base_url or _BASE_URLS[self.environment]).rstrip("/")

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token:
            errors.append("GOCARDLESS_ACCESS_TOKEN não configurado")

        if self.base_url and not self.base_url.startswith(("http://", "https://")):
            errors.append("GOCARDLESS_BASE_URL deve ser uma URL absoluta")

        if self.number_of_retries < 0:
            errors.append("GOCARDLESS_MAX_RETRIES deve ser >= 0")

        if self.wait_between_retries_seconds < 0:
            errors.append("GOCARDLESS_RETRY_WAIT_SECONDS deve ser >= 0")

        if self.request_timeout_seconds <= 0:
            errors.append("GOCARDLESS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.signing is not None:
            errors.extend(self.signing.validate())

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para Environment."""
    if env_str.lower() in ("sandbox", "test", "staging"):
        return Environment.SANDBOX
    return Environment.LIVE


def _load_signing_from_env() -> RequestSigningSettings | None:
    private_key_pem = os.getenv("GOCARDLESS_SIGNING_PRIVATE_KEY", "")
    key_id = os.getenv("GOCARDLESS_SIGNING_KEY_ID", "")
    if not private_key_pem and not key_id:
        return None
    return RequestSigningSettings(
        private_key_pem=private_key_pem,
        public_key_id=key_id,
        private_key_passphrase=os.getenv("GOCARDLESS_SIGNING_KEY_PASSPHRASE") or None,
    )


def _load_from_env() -> ClientSettings:
    """Carrega ClientSettings a partir de variáveis de ambiente."""
    return ClientSettings(
        access_token=os.getenv("GOCARDLESS_ACCESS_TOKEN", ""),
        environment=_parse_environment(os.getenv("GOCARDLESS_ENVIRONMENT", "live")),
        base_url=os.getenv("GOCARDLESS_BASE_URL", ""),
        api_version=os.getenv("GOCARDLESS_API_VERSION", API_VERSION),
        number_of_retries=int(os.getenv("GOCARDLESS_MAX_RETRIES", "2")),
        wait_between_retries_seconds=float(os.getenv("GOCARDLESS_RETRY_WAIT_SECONDS", "0.5")),
        request_timeout_seconds=float(os.getenv("GOCARDLESS_REQUEST_TIMEOUT_SECONDS", "30")),
        error_on_idempotency_conflict=os.getenv(
            "GOCARDLESS_ERROR_ON_IDEMPOTENCY_CONFLICT", ""
        ).lower()
        in ("true", "1", "yes"),
        signing=_load_signing_from_env(),
        webhook_secret=os.getenv("GOCARDLESS_WEBHOOK_SECRET", ""),
    )


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Retorna instância cacheada de ClientSettings carregada do ambiente."""
    return _load_from_env()
