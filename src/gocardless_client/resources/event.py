"""Eventos entregues por webhook."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventDetails(BaseModel):
    """Detalhes do que originou o evento."""

    model_config = ConfigDict(extra="allow")

    origin: str | None = None
    cause: str | None = None
    description: str | None = None
    scheme: str | None = None
    reason_code: str | None = None
    not_retried_reason: str | None = None
    bank_account_id: str | None = None


class Event(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime | None = None
    resource_type: str | None = None
    action: str | None = None
    links: dict[str, str] = Field(default_factory=dict)
    details: EventDetails = Field(default_factory=EventDetails)
    metadata: dict[str, Any] = Field(default_factory=dict)


class EventListResponse(BaseModel):
    """Corpo de webhook: `{"events": [...]}`."""

    model_config = ConfigDict(extra="ignore")

    events: list[Event] = Field(default_factory=list)
