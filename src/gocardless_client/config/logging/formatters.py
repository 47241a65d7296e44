"""Formatter JSON dos logs do cliente."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
        "client_version",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com REQUIRED_LOG_FIELDS e nomes curtos.

    Campos de `extra` (attempt, status_code, request_id...) saem no
    mesmo objeto JSON:

        {"asctime": "...", "level": "WARNING",
         "logger": "gocardless_client.http.executor", "message": "http_retry",
         "correlation_id": "abc-123", "service": "billing_worker",
         "client_version": "1.0.0", "attempt": 1, "reason": "timeout"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS)),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
