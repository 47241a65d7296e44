"""Execução de requisições HTTP contra a API."""

from .executor import (
    Conflict,
    RequestDescriptor,
    RequestExecutor,
    RetryableFailure,
    Success,
    TerminalFailure,
    build_user_agent,
    conflicting_resource_id,
)
from .query_string import QueryParam, build_query_string, query_param, substitute_path
from .request_settings import RequestSettings

__all__ = [
    "Conflict",
    "QueryParam",
    "RequestDescriptor",
    "RequestExecutor",
    "RequestSettings",
    "RetryableFailure",
    "Success",
    "TerminalFailure",
    "build_query_string",
    "build_user_agent",
    "conflicting_resource_id",
    "query_param",
    "substitute_path",
]
