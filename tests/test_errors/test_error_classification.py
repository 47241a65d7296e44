"""Testes de classificação de erros da API."""

from __future__ import annotations

import httpx
import pytest

from gocardless_client import (
    ApiErrorType,
    ApiException,
    AuthenticationFailedException,
    GoCardlessClient,
    InsufficientPermissionsException,
    InternalException,
    InvalidApiUsageException,
    InvalidStateException,
    RateLimitReachedException,
    UnexpectedResponseException,
    ValidationFailedException,
)
from gocardless_client.errors import error_from_response
from gocardless_client.errors.classifier import UNEXPECTED_RESPONSE_MESSAGE, resolve_error_type
from gocardless_client.resources import MandateCreateRequest
from tests.fakes.mock_http import MockHttp, load_fixture


@pytest.mark.asyncio
async def test_insufficient_permissions_overrides_wire_type(
    client: GoCardlessClient, mock_http: MockHttp
) -> None:
    mock_http.enqueue_response(403, "insufficient_permissions.json")

    with pytest.raises(InsufficientPermissionsException) as exc_info:
        await client.mandates.create(MandateCreateRequest())

    exc = exc_info.value
    assert exc.type is ApiErrorType.INSUFFICIENT_PERMISSIONS
    assert exc.code == 403
    assert exc.message == "Insufficient permissions"
    assert exc.request_id == "b0e48853-abcd-41fa-9554-5f71820e915d"
    assert exc.documentation_url == (
        "https://developer.gocardless.com/api-reference#insufficient_permissions"
    )
    assert exc.errors[0].reason == "insufficient_permissions"
    assert exc.response_message is not None
    assert exc.response_message.status_code == 403


@pytest.mark.asyncio
async def test_validation_failed_exposes_field_errors(
    client: GoCardlessClient, mock_http: MockHttp
) -> None:
    mock_http.enqueue_response(422, "validation_failed.json")

    with pytest.raises(ValidationFailedException) as exc_info:
        await client.mandates.create(MandateCreateRequest(scheme="nope"))

    exc = exc_info.value
    assert exc.type is ApiErrorType.VALIDATION_FAILED
    assert exc.code == 422
    assert exc.request_id == "2f33a336-abcd-4aeb-85c0-101286065dfd"
    assert len(exc.errors) == 1
    assert exc.errors[0].field == "scheme"
    assert exc.errors[0].message == "must be one of bacs, sepa_core, autogiro"
    assert exc.errors[0].request_pointer == "/mandates/scheme"


@pytest.mark.asyncio
async def test_authentication_failure(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(401, "authentication_failure.json")

    with pytest.raises(AuthenticationFailedException) as exc_info:
        await client.mandates.get("MD000126")

    assert exc_info.value.type is ApiErrorType.AUTHENTICATION_FAILED
    assert exc_info.value.message == "Authentication Failed"
    assert str(exc_info.value) == "Authentication Failed"


@pytest.mark.asyncio
async def test_rate_limit_reached(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(429, "rate_limit_reached.json")

    with pytest.raises(RateLimitReachedException) as exc_info:
        await client.mandates.get("MD000126")

    assert exc_info.value.type is ApiErrorType.RATE_LIMIT_REACHED
    assert exc_info.value.message == "Rate Limit Reached you have made too many requests"


@pytest.mark.asyncio
async def test_structured_internal_error(client: GoCardlessClient, mock_http: MockHttp) -> None:
    mock_http.enqueue_response(500, "internal_error.json")

    with pytest.raises(InternalException) as exc_info:
        await client.mandates.get("MD000126")

    assert not isinstance(exc_info.value, UnexpectedResponseException)
    assert exc_info.value.type is ApiErrorType.GOCARDLESS
    assert exc_info.value.errors[0].reason == "internal_server_error"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "fixture", "content_type"),
    [
        (502, "error_page.html", "text/html"),
        (500, "server_error.txt", "text/plain"),
    ],
)
async def test_undecodable_error_body_raises_unexpected_response(
    client: GoCardlessClient,
    mock_http: MockHttp,
    status_code: int,
    fixture: str,
    content_type: str,
) -> None:
    mock_http.enqueue_response(status_code, fixture, content_type=content_type)

    with pytest.raises(UnexpectedResponseException) as exc_info:
        await client.mandates.create(MandateCreateRequest())

    exc = exc_info.value
    assert exc.message == UNEXPECTED_RESPONSE_MESSAGE
    assert exc.type is ApiErrorType.GOCARDLESS
    assert exc.code == status_code
    assert exc.errors == []
    assert exc.response_message is not None
    assert exc.response_message.content == load_fixture(fixture)
    assert len(mock_http.requests) == 1


def test_json_body_without_error_envelope_is_unexpected() -> None:
    response = httpx.Response(400, json={"unexpected": True})

    exc = error_from_response(response)

    assert isinstance(exc, UnexpectedResponseException)
    assert exc.response_message is response


def test_unknown_type_on_client_error_is_invalid_api_usage() -> None:
    response = httpx.Response(
        400,
        json={"error": {"type": "brand_new_type", "message": "Bad", "code": 400}},
    )

    exc = error_from_response(response)

    assert isinstance(exc, InvalidApiUsageException)
    assert exc.type is ApiErrorType.INVALID_API_USAGE


def test_missing_code_is_filled_from_status() -> None:
    response = httpx.Response(422, json={"error": {"type": "invalid_state", "message": "x"}})

    exc = error_from_response(response)

    assert isinstance(exc, ApiException)
    assert exc.code == 422


@pytest.mark.parametrize(
    ("status_code", "declared", "expected"),
    [
        (401, "invalid_api_usage", ApiErrorType.AUTHENTICATION_FAILED),
        (403, "validation_failed", ApiErrorType.INSUFFICIENT_PERMISSIONS),
        (429, "gocardless", ApiErrorType.RATE_LIMIT_REACHED),
        (409, "invalid_state", ApiErrorType.INVALID_STATE),
        (422, "validation_failed", ApiErrorType.VALIDATION_FAILED),
        (400, "invalid_api_usage", ApiErrorType.INVALID_API_USAGE),
        (500, "gocardless", ApiErrorType.GOCARDLESS),
        (503, "something_else", ApiErrorType.GOCARDLESS),
        (418, "", ApiErrorType.INVALID_API_USAGE),
    ],
)
def test_resolve_error_type(status_code: int, declared: str, expected: ApiErrorType) -> None:
    assert resolve_error_type(status_code, declared) is expected


@pytest.mark.parametrize(
    ("status_code", "error_body", "expected_cls"),
    [
        (
            403,
            {"type": "invalid_api_usage", "message": "Forbidden", "errors": None},
            InsufficientPermissionsException,
        ),
        (
            422,
            {
                "type": "validation_failed",
                "message": None,
                "code": None,
                "errors": [{"field": "scheme", "message": None, "links": None}],
            },
            ValidationFailedException,
        ),
        (
            409,
            {
                "type": "invalid_state",
                "message": "conflict",
                "errors": [
                    {
                        "reason": "idempotent_creation_conflict",
                        "links": {"conflicting_resource_id": "MD1", "other": None},
                    }
                ],
            },
            InvalidStateException,
        ),
        (401, {"type": None, "message": None}, AuthenticationFailedException),
    ],
)
def test_null_fields_do_not_hide_error_type(
    status_code: int, error_body: dict[str, object], expected_cls: type[ApiException]
) -> None:
    response = httpx.Response(status_code, json={"error": error_body})

    exc = error_from_response(response)

    assert type(exc) is expected_cls
    assert exc.code == status_code
    assert exc.response_message is response


def test_null_link_entries_are_dropped() -> None:
    response = httpx.Response(
        409,
        json={
            "error": {
                "type": "invalid_state",
                "errors": [{"links": {"conflicting_resource_id": "MD1", "other": None}}],
            }
        },
    )

    exc = error_from_response(response)

    assert exc.errors[0].links == {"conflicting_resource_id": "MD1"}


def test_null_error_envelope_is_unexpected() -> None:
    response = httpx.Response(500, json={"error": None})

    assert isinstance(error_from_response(response), UnexpectedResponseException)
