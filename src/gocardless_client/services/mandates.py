"""Serviço de mandates: liga os DTOs ao executor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gocardless_client.pagination import iterate_all
from gocardless_client.resources.mandate import (
    Mandate,
    MandateCancelRequest,
    MandateCreateRequest,
    MandateGetRequest,
    MandateListRequest,
    MandateListResponse,
    MandateReinstateRequest,
    MandateResponse,
    MandateUpdateRequest,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from gocardless_client.http.executor import RequestExecutor
    from gocardless_client.http.request_settings import RequestSettings


class MandateService:
    """Operações sobre `/mandates`."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def create(
        self,
        request: MandateCreateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        """Cria um mandate.

        Em conflito de criação idempotente, devolve o mandate já criado.
        """

        async def fetch_existing(identity: str) -> MandateResponse:
            return await self.get(identity, request_settings=request_settings)

        return await self._executor.execute(
            MandateResponse,
            "POST",
            "/mandates",
            request=request or MandateCreateRequest(),
            payload_key="mandates",
            conflict_resolver=fetch_existing,
            request_settings=request_settings,
        )

    async def list(
        self,
        request: MandateListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateListResponse:
        return await self._executor.execute(
            MandateListResponse,
            "GET",
            "/mandates",
            request=request or MandateListRequest(),
            request_settings=request_settings,
        )

    async def all(
        self,
        request: MandateListRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> AsyncIterator[Mandate]:
        """Itera todos os mandates, seguindo o cursor `after`."""
        base_request = request or MandateListRequest()

        async def fetch_page(after: str | None) -> tuple[list[Mandate], str | None]:
            page_request = base_request.model_copy(update={"after": after})
            page = await self.list(page_request, request_settings)
            return page.mandates, page.meta.cursors.after

        async for mandate in iterate_all(fetch_page):
            yield mandate

    async def get(
        self,
        identity: str,
        request: MandateGetRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        if not identity:
            raise ValueError("identity é obrigatório")
        return await self._executor.execute(
            MandateResponse,
            "GET",
            "/mandates/:identity",
            url_params=[("identity", identity)],
            request=request or MandateGetRequest(),
            request_settings=request_settings,
        )

    async def update(
        self,
        identity: str,
        request: MandateUpdateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        if not identity:
            raise ValueError("identity é obrigatório")
        return await self._executor.execute(
            MandateResponse,
            "PUT",
            "/mandates/:identity",
            url_params=[("identity", identity)],
            request=request or MandateUpdateRequest(),
            payload_key="mandates",
            request_settings=request_settings,
        )

    async def cancel(
        self,
        identity: str,
        request: MandateCancelRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        if not identity:
            raise ValueError("identity é obrigatório")
        return await self._executor.execute(
            MandateResponse,
            "POST",
            "/mandates/:identity/actions/cancel",
            url_params=[("identity", identity)],
            request=request or MandateCancelRequest(),
            payload_key="data",
            request_settings=request_settings,
        )

    async def reinstate(
        self,
        identity: str,
        request: MandateReinstateRequest | None = None,
        request_settings: RequestSettings | None = None,
    ) -> MandateResponse:
        if not identity:
            raise ValueError("identity é obrigatório")
        return await self._executor.execute(
            MandateResponse,
            "POST",
            "/mandates/:identity/actions/reinstate",
            url_params=[("identity", identity)],
            request=request or MandateReinstateRequest(),
            payload_key="data",
            request_settings=request_settings,
        )
