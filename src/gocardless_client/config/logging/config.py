"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Níveis configuráveis por ambiente

A biblioteca nunca chama `configure_logging` sozinha: quem integra o
cliente decide se quer os logs em JSON.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gocardless_client.config.logging.filters import CorrelationIdFilter
from gocardless_client.config.logging.formatters import create_json_formatter
from gocardless_client.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "gocardless_client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual. Usa o ContextVar do pacote se omitida.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter()

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(formatter)
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    Args:
        name: Nome do logger (geralmente __name__).

    Returns:
        Logger configurado.
    """
    return logging.getLogger(name)


def log_retry(
    logger: logging.Logger,
    method: str,
    attempt: int,
    reason: str,
    wait_seconds: float,
) -> None:
    """Log observável de nova tentativa após falha transitória (sem PII).

    Args:
        logger: Logger instance.
        method: Método HTTP da chamada.
        attempt: Número da tentativa que falhou (1-based).
        reason: Classe da falha (ex: "timeout", "connection_error").
        wait_seconds: Espera antes da próxima tentativa.
    """
    logger.warning(
        "http_retry",
        extra={
            "method": method,
            "attempt": attempt,
            "reason": reason,
            "wait_seconds": wait_seconds,
        },
    )
