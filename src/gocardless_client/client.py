"""Ponto de entrada do cliente GoCardless."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import httpx

from gocardless_client.config.settings import ClientSettings, Environment, get_client_settings
from gocardless_client.http.executor import RequestExecutor
from gocardless_client.services import MandateService

if TYPE_CHECKING:
    from types import TracebackType

    from gocardless_client.signing import RequestSigningSettings

logger = logging.getLogger(__name__)


class GoCardlessClient:
    """Cliente assíncrono da API GoCardless.

    Um httpx.AsyncClient injetado é reutilizado e nunca fechado pelo
    cliente; sem injeção, o cliente cria e fecha o seu próprio.
    """

    def __init__(
        self,
        settings: ClientSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        errors = settings.validate()
        if errors:
            raise ValueError(f"Configuração inválida do cliente: {'; '.join(errors)}")

        self._settings = settings
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=settings.request_timeout_seconds,
        )
        self._executor = RequestExecutor(settings, self._http_client)
        self.mandates = MandateService(self._executor)

    @classmethod
    def create(
        cls,
        access_token: str,
        environment: Environment = Environment.LIVE,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        error_on_idempotency_conflict: bool = False,
        signing: RequestSigningSettings | None = None,
        **overrides: Any,
    ) -> GoCardlessClient:
        """Cria o cliente para um ambiente ou uma URL base customizada.

        Args:
            access_token: Token Bearer
            environment: LIVE ou SANDBOX (ignorado se base_url for informada)
            base_url: URL base customizada
            http_client: Transporte compartilhado (opcional)
            error_on_idempotency_conflict: Levanta em conflito idempotente
            signing: Configuração de assinatura de requisições
            **overrides: Demais campos de ClientSettings
        """
        settings = ClientSettings(
            access_token=access_token,
            environment=environment,
            base_url=base_url or "",
            error_on_idempotency_conflict=error_on_idempotency_conflict,
            signing=signing,
            **overrides,
        )
        return cls(settings, http_client)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
        **overrides: Any,
    ) -> GoCardlessClient:
        """Cria o cliente a partir de ClientSettings (padrão: variáveis de ambiente)."""
        base = settings or get_client_settings()
        return cls(replace(base, **overrides) if overrides else base, http_client)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def executor(self) -> RequestExecutor:
        """Executor compartilhado pelos serviços (para recursos gerados)."""
        return self._executor

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> GoCardlessClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
