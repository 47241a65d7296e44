"""Configuração de logging estruturado do cliente.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from gocardless_client.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação integradora
    configure_logging(level="INFO", service_name="billing_worker")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"attempt": 1})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
- client_version

Nunca logar access tokens, chaves privadas ou corpos de requisição.
"""

from gocardless_client.config.logging.config import (
    configure_logging,
    get_logger,
    log_retry,
)
from gocardless_client.config.logging.filters import (
    REDACTED,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
)
from gocardless_client.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_retry",
]
