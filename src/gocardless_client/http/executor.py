"""Executor de chamadas à API GoCardless.

Transforma uma chamada lógica em uma ou mais tentativas HTTP:
- Retry em timeout/falha de conexão (mesma Idempotency-Key em todas)
- Resolução de conflito de criação idempotente buscando o recurso existente
- Classificação de respostas de erro em exceções tipadas
- Assinatura opcional de cada tentativa (nonce/created novos por tentativa)

As tentativas de uma chamada são estritamente sequenciais. O executor não
guarda estado mutável entre chamadas; ClientSettings é somente leitura.
"""

from __future__ import annotations

import asyncio
import json
import logging
import platform
import re
import uuid
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import ValidationError

from gocardless_client.config.logging import log_retry
from gocardless_client.errors import (
    ApiException,
    InvalidStateException,
    error_from_response,
)
from gocardless_client.errors.classifier import unexpected_response_error
from gocardless_client.http.constants import (
    API_VERSION_HEADER,
    AUTHORIZATION_HEADER,
    CLIENT_LIBRARY,
    CLIENT_LIBRARY_HEADER,
    CLIENT_VERSION,
    CLIENT_VERSION_HEADER,
    CONFLICTING_RESOURCE_LINK,
    IDEMPOTENCY_KEY_HEADER,
    IDEMPOTENT_CREATION_CONFLICT,
    JSON_CONTENT_TYPE,
)
from gocardless_client.http.query_string import build_query_string, substitute_path
from gocardless_client.http.request_settings import RequestSettings
from gocardless_client.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from gocardless_client.signing import sign_request

if TYPE_CHECKING:
    from gocardless_client.config.settings import ClientSettings
    from gocardless_client.resources.base import ApiRequest, ApiResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ApiResponse")

ConflictResolver = Callable[[str], Awaitable[T]]

_DEFAULT_REQUEST_SETTINGS = RequestSettings()


@dataclass(frozen=True)
class RequestDescriptor:
    """Descrição imutável de uma chamada lógica."""

    method: str
    path: str
    url_params: tuple[tuple[str, Any], ...]
    request: ApiRequest | None
    payload_key: str | None


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class RetryableFailure:
    """Timeout ou falha de conexão; a tentativa pode ser repetida."""

    error: httpx.TransportError
    reason: str


@dataclass(frozen=True)
class Conflict:
    """Recurso já criado com a mesma Idempotency-Key."""

    conflicting_resource_id: str
    error: InvalidStateException


@dataclass(frozen=True)
class TerminalFailure:
    """Erro classificado; nunca repetido."""

    error: ApiException


AttemptOutcome = Success[T] | RetryableFailure | Conflict | TerminalFailure


def build_user_agent() -> str:
    """User-Agent com versão do cliente, do Python e do sistema."""
    os_description = re.sub(r"[;:#()~]", "-", platform.platform())
    return (
        f"{CLIENT_LIBRARY}/{CLIENT_VERSION} "
        f"python/{platform.python_version()} {os_description}"
    )


def conflicting_resource_id(error: ApiException) -> str | None:
    """ID do recurso conflitante, se o erro for conflito de criação idempotente."""
    if not isinstance(error, InvalidStateException) or not error.errors:
        return None
    first = error.errors[0]
    if first.reason != IDEMPOTENT_CREATION_CONFLICT:
        return None
    return first.links.get(CONFLICTING_RESOURCE_LINK)


class RequestExecutor:
    """Executa chamadas lógicas com retry, conflito idempotente e assinatura."""

    def __init__(
        self,
        settings: ClientSettings,
        http_client: httpx.AsyncClient,
        user_agent: str | None = None,
    ) -> None:
        self._settings = settings
        self._http_client = http_client
        self._user_agent = user_agent or build_user_agent()

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    async def execute(
        self,
        response_type: type[T],
        method: str,
        path: str,
        url_params: Sequence[tuple[str, Any]] = (),
        request: ApiRequest | None = None,
        payload_key: str | None = None,
        conflict_resolver: ConflictResolver[T] | None = None,
        request_settings: RequestSettings | None = None,
    ) -> T:
        """Executa uma chamada lógica e devolve a resposta tipada.

        Args:
            response_type: Modelo pydantic da resposta de sucesso
            method: Método HTTP
            path: Template do path com placeholders `:nome`
            url_params: Substituições (placeholder, valor), em ordem
            request: Objeto de requisição (query em GET, corpo nos demais)
            payload_key: Chave que envolve o corpo JSON (None = sem corpo)
            conflict_resolver: Busca o recurso pelo ID em conflitos de
                criação idempotente
            request_settings: Sobrescritas desta chamada

        Returns:
            Resposta tipada com `response_message` anexada.

        Raises:
            ApiException: Subclasse correspondente ao erro da API
            httpx.TimeoutException | httpx.NetworkError: Na última tentativa
            TimeoutError: Se `request_settings.timeout` expirar
        """
        descriptor = RequestDescriptor(
            method=method.upper(),
            path=path,
            url_params=tuple(url_params),
            request=request,
            payload_key=payload_key,
        )
        settings = request_settings or _DEFAULT_REQUEST_SETTINGS

        token = None if get_correlation_id() else set_correlation_id()
        try:
            call = self._execute_with_retries(
                descriptor, response_type, conflict_resolver, settings
            )
            if settings.timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout=settings.timeout)
        finally:
            if token is not None:
                reset_correlation_id(token)

    async def _execute_with_retries(
        self,
        descriptor: RequestDescriptor,
        response_type: type[T],
        conflict_resolver: ConflictResolver[T] | None,
        settings: RequestSettings,
    ) -> T:
        number_of_retries = (
            settings.number_of_retries
            if settings.number_of_retries is not None
            else self._settings.number_of_retries
        )
        wait_between_retries = (
            settings.wait_between_retries
            if settings.wait_between_retries is not None
            else self._settings.wait_between_retries_seconds
        )
        idempotency_key = self._resolve_idempotency_key(descriptor.request)

        for attempt in range(1, number_of_retries + 1):
            outcome = await self._attempt(descriptor, response_type, idempotency_key, settings)
            if isinstance(outcome, RetryableFailure):
                log_retry(logger, descriptor.method, attempt, outcome.reason, wait_between_retries)
                await asyncio.sleep(wait_between_retries)
                continue
            return await self._resolve(outcome, conflict_resolver)

        outcome = await self._attempt(descriptor, response_type, idempotency_key, settings)
        if isinstance(outcome, RetryableFailure):
            logger.error(
                "http_retry_exhausted",
                extra={"method": descriptor.method, "reason": outcome.reason},
            )
            raise outcome.error
        return await self._resolve(outcome, conflict_resolver)

    async def _resolve(
        self,
        outcome: Success[T] | Conflict | TerminalFailure,
        conflict_resolver: ConflictResolver[T] | None,
    ) -> T:
        if isinstance(outcome, Success):
            return outcome.value
        if isinstance(outcome, TerminalFailure):
            raise outcome.error

        if self._settings.error_on_idempotency_conflict or conflict_resolver is None:
            raise outcome.error
        logger.info(
            "idempotent_creation_conflict_resolved",
            extra={"conflicting_resource_id": outcome.conflicting_resource_id},
        )
        # Falhas do resolver são terminais: propagam sem nova tentativa
        return await conflict_resolver(outcome.conflicting_resource_id)

    @staticmethod
    def _resolve_idempotency_key(request: ApiRequest | None) -> str | None:
        if request is None or not request.requires_idempotency_key:
            return None
        return getattr(request, "idempotency_key", None) or str(uuid.uuid4())

    async def _attempt(
        self,
        descriptor: RequestDescriptor,
        response_type: type[T],
        idempotency_key: str | None,
        settings: RequestSettings,
    ) -> AttemptOutcome[T]:
        """Uma tentativa HTTP; devolve o desfecho sem levantar erros de API."""
        http_request = self.build_request(descriptor, idempotency_key, settings)
        try:
            response = await self._http_client.send(http_request)
        except httpx.TimeoutException as exc:
            return RetryableFailure(error=exc, reason="timeout")
        except httpx.NetworkError as exc:
            return RetryableFailure(error=exc, reason="connection_error")

        if response.is_success:
            try:
                return Success(self._decode_success(response, response_type))
            except ValidationError:
                logger.warning(
                    "api_response_undecodable",
                    extra={"status_code": response.status_code},
                )
                return TerminalFailure(unexpected_response_error(response))

        error = error_from_response(response)
        conflict_id = conflicting_resource_id(error)
        if conflict_id is not None and isinstance(error, InvalidStateException):
            return Conflict(conflicting_resource_id=conflict_id, error=error)
        return TerminalFailure(error)

    @staticmethod
    def _decode_success(response: httpx.Response, response_type: type[T]) -> T:
        body = response.text.strip()
        if not body or body == "null":
            result = response_type()
        else:
            result = response_type.model_validate_json(body)
        result.attach_response(response)
        return result

    def build_request(
        self,
        descriptor: RequestDescriptor,
        idempotency_key: str | None,
        settings: RequestSettings,
    ) -> httpx.Request:
        """Monta (e assina) a requisição de uma tentativa."""
        path = substitute_path(descriptor.path, descriptor.url_params)
        if descriptor.method == "GET":
            query_string = build_query_string(descriptor.request)
            if query_string:
                path = f"{path}?{query_string}"

        content: str | None = None
        if (
            descriptor.method != "GET"
            and descriptor.request is not None
            and descriptor.payload_key
        ):
            content = json.dumps(
                {descriptor.payload_key: descriptor.request.to_payload()},
                ensure_ascii=False,
            )

        headers = self._default_headers()
        if content is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if idempotency_key is not None:
            headers[IDEMPOTENCY_KEY_HEADER] = idempotency_key

        http_request = self._http_client.build_request(
            descriptor.method,
            f"{self._settings.api_base_url}{path}",
            headers=headers,
            content=content.encode("utf-8") if content is not None else None,
        )
        for name, value in settings.headers.items():
            http_request.headers[name] = value

        sign_request(http_request, self._settings.signing, content)

        if settings.customise_request is not None:
            settings.customise_request(http_request)
        return http_request

    def _default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            AUTHORIZATION_HEADER: f"Bearer {self._settings.access_token}",
            "User-Agent": self._user_agent,
            API_VERSION_HEADER: self._settings.api_version,
            CLIENT_VERSION_HEADER: CLIENT_VERSION,
            CLIENT_LIBRARY_HEADER: CLIENT_LIBRARY,
        }
