"""Recurso Mandate e DTOs das suas operações."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from gocardless_client.http.query_string import QueryParam, query_param
from gocardless_client.resources.base import (
    ApiRequest,
    ApiResponse,
    IdempotentRequest,
    ListMeta,
)


class MandateStatus(StrEnum):
    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    SUSPENDED_BY_PAYER = "suspended_by_payer"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    CONSUMED = "consumed"
    BLOCKED = "blocked"


class MandateLinks(BaseModel):
    model_config = ConfigDict(extra="ignore")

    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    new_mandate: str | None = None


class Mandate(BaseModel):
    """Autorização de débito de um cliente."""

    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime | None = None
    next_possible_charge_date: str | None = None
    payments_require_approval: bool | None = None
    reference: str | None = None
    scheme: str | None = None
    status: str | None = None
    links: MandateLinks = Field(default_factory=MandateLinks)
    metadata: dict[str, str] = Field(default_factory=dict)


class MandateResponse(ApiResponse):
    """Envelope `{"mandates": {...}}`."""

    mandate: Mandate | None = Field(default=None, alias="mandates")


class MandateListResponse(ApiResponse):
    """Envelope `{"mandates": [...], "meta": {...}}`."""

    mandates: list[Mandate] = Field(default_factory=list)
    meta: ListMeta = Field(default_factory=ListMeta)


class MandateCreateLinks(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_bank_account: str
    creditor: str | None = None


class MandateCreateRequest(IdempotentRequest):
    links: MandateCreateLinks | None = None
    metadata: dict[str, str] | None = None
    payer_ip_address: str | None = None
    reference: str | None = None
    scheme: str | None = None


class MandateGetRequest(ApiRequest):
    pass


class CreatedAtFilter(BaseModel):
    """Filtro `created_at[gt|gte|lt|lte]`."""

    model_config = ConfigDict(extra="forbid")

    query_params: ClassVar[tuple[QueryParam, ...]] = (
        query_param("gt"),
        query_param("gte"),
        query_param("lt"),
        query_param("lte"),
    )

    gt: datetime | None = None
    gte: datetime | None = None
    lt: datetime | None = None
    lte: datetime | None = None


class MandateListRequest(ApiRequest):
    query_params = (
        query_param("after"),
        query_param("before"),
        query_param("created_at", nested=True),
        query_param("creditor"),
        query_param("customer"),
        query_param("customer_bank_account"),
        query_param("limit"),
        query_param("mandate_type"),
        query_param("reference"),
        query_param("scheme"),
        query_param("status"),
    )

    after: str | None = None
    before: str | None = None
    created_at: CreatedAtFilter | None = None
    creditor: str | None = None
    customer: str | None = None
    customer_bank_account: str | None = None
    limit: int | None = None
    mandate_type: str | None = None
    reference: str | None = None
    scheme: list[str] | None = None
    status: list[MandateStatus] | None = None


class MandateUpdateRequest(ApiRequest):
    metadata: dict[str, str] | None = None


class MandateCancelRequest(ApiRequest):
    metadata: dict[str, str] | None = None


class MandateReinstateRequest(ApiRequest):
    metadata: dict[str, str] | None = None
