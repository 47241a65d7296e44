"""DTOs de requisição/resposta."""

from .base import ApiRequest, ApiResponse, Cursors, IdempotentRequest, ListMeta
from .event import Event, EventDetails, EventListResponse
from .mandate import (
    CreatedAtFilter,
    Mandate,
    MandateCancelRequest,
    MandateCreateLinks,
    MandateCreateRequest,
    MandateGetRequest,
    MandateLinks,
    MandateListRequest,
    MandateListResponse,
    MandateReinstateRequest,
    MandateResponse,
    MandateStatus,
    MandateUpdateRequest,
)

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "CreatedAtFilter",
    "Cursors",
    "Event",
    "EventDetails",
    "EventListResponse",
    "IdempotentRequest",
    "ListMeta",
    "Mandate",
    "MandateCancelRequest",
    "MandateCreateLinks",
    "MandateCreateRequest",
    "MandateGetRequest",
    "MandateLinks",
    "MandateListRequest",
    "MandateListResponse",
    "MandateReinstateRequest",
    "MandateResponse",
    "MandateStatus",
    "MandateUpdateRequest",
]
