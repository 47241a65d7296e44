"""Filters que enriquecem e higienizam records do cliente.

Campos injetados:
- correlation_id: ID de rastreamento da chamada lógica
- service: Nome do serviço integrador
- client_version: Versão desta biblioteca
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gocardless_client.http.constants import CLIENT_VERSION

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

# Atributos de `extra` que nunca podem chegar ao handler em claro
SENSITIVE_FIELDS = frozenset(
    {
        "access_token",
        "authorization",
        "private_key_pem",
        "private_key_passphrase",
        "webhook_secret",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e client_version em cada record.

    Valores passados via `extra` com nomes de SENSITIVE_FIELDS são
    substituídos por REDACTED. O filter nunca descarta records.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        record.client_version = CLIENT_VERSION

        for field in SENSITIVE_FIELDS.intersection(vars(record)):
            setattr(record, field, REDACTED)
        return True
