"""Testes do MandateService (rotas, envelopes e paginação)."""

from __future__ import annotations

import json

import pytest

from gocardless_client import GoCardlessClient
from gocardless_client.pagination import iterate_all
from gocardless_client.resources import (
    MandateCancelRequest,
    MandateListRequest,
    MandateStatus,
    MandateUpdateRequest,
)
from tests.fakes.mock_http import MockHttp


@pytest.mark.asyncio
async def test_list_decodes_page_and_cursors(
    client: GoCardlessClient, mock_http: MockHttp
) -> None:
    mock_http.enqueue_response(200, "list_mandates_page_1.json")

    page = await client.mandates.list(MandateListRequest(limit=2))

    mock_http.assert_request_made("GET", "/mandates?limit=2")
    assert [mandate.id for mandate in page.mandates] == ["MD000001", "MD000002"]
    assert page.mandates[0].status == MandateStatus.ACTIVE
    assert page.meta.cursors.after == "MD000002"
    assert page.meta.limit == 2


@pytest.mark.asyncio
async def test_all_follows_after_cursor(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(200, "list_mandates_page_1.json")
    mock_http.enqueue_response(200, "list_mandates_page_2.json")

    ids = [mandate.id async for mandate in client.mandates.all(MandateListRequest(limit=2))]

    assert ids == ["MD000001", "MD000002", "MD000003"]
    mock_http.assert_request_made("GET", "/mandates?limit=2")
    mock_http.assert_request_made("GET", "/mandates?after=MD000002&limit=2")


@pytest.mark.asyncio
async def test_iterate_all_stops_when_cursor_is_none() -> None:
    pages = {None: (["a", "b"], "b"), "b": (["c"], None)}
    seen: list[str | None] = []

    async def fetch_page(after: str | None) -> tuple[list[str], str | None]:
        seen.append(after)
        return pages[after]

    items = [item async for item in iterate_all(fetch_page)]

    assert items == ["a", "b", "c"]
    assert seen == [None, "b"]


@pytest.mark.asyncio
async def test_update_uses_put_with_mandates_envelope(
    client: GoCardlessClient, mock_http: MockHttp
) -> None:
    mock_http.enqueue_response(200, "create_a_mandate_response.json")

    await client.mandates.update("MD000126", MandateUpdateRequest(metadata={"key": "value"}))

    request = mock_http.assert_request_made("PUT", "/mandates/MD000126")
    assert json.loads(request.content) == {"mandates": {"metadata": {"key": "value"}}}
    assert "Idempotency-Key" not in request.headers


@pytest.mark.asyncio
async def test_cancel_uses_data_envelope(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(200, "create_a_mandate_response.json")

    await client.mandates.cancel("MD000126", MandateCancelRequest(metadata={"reason": "x"}))

    request = mock_http.assert_request_made("POST", "/mandates/MD000126/actions/cancel")
    assert json.loads(request.content) == {"data": {"metadata": {"reason": "x"}}}


@pytest.mark.asyncio
async def test_reinstate_route(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(200, "create_a_mandate_response.json")

    response = await client.mandates.reinstate("MD000126")

    mock_http.assert_request_made("POST", "/mandates/MD000126/actions/reinstate")
    assert response.mandate is not None
    assert response.mandate.metadata == {"contract": "ABCD1234"}


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get", "update", "cancel", "reinstate"])
async def test_identity_is_required(
    client: GoCardlessClient, mock_http: MockHttp, operation: str
) -> None:
    with pytest.raises(ValueError, match="identity"):
        await getattr(client.mandates, operation)("")

    assert mock_http.requests == []
