"""Parse de webhooks: valida a assinatura antes de decodificar eventos."""

from __future__ import annotations

import logging

from gocardless_client.errors import InvalidSignatureException
from gocardless_client.resources.event import Event, EventListResponse

from .signature import validate_webhook_signature

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "Webhook-Signature"


def parse(body: str | bytes, webhook_secret: str, signature_header: str) -> list[Event]:
    """Valida a assinatura e devolve os eventos do corpo, em ordem.

    Args:
        body: Corpo bruto recebido
        webhook_secret: Secret do endpoint de webhook
        signature_header: Valor do cabeçalho Webhook-Signature

    Raises:
        ValueError: Se `webhook_secret` estiver vazio; é erro de
            configuração do integrador, não de assinatura, e nenhum HMAC
            é calculado
        InvalidSignatureException: Se a assinatura não conferir; nenhum
            dado do corpo é decodificado nesse caso
        pydantic.ValidationError: Se o corpo assinado não for um envelope
            de eventos válido

    Returns:
        Lista de Event
    """
    raw_body = body.encode("utf-8") if isinstance(body, str) else body
    if not webhook_secret:
        raise ValueError("webhook_secret é obrigatório")

    if not validate_webhook_signature(raw_body, signature_header or "", webhook_secret):
        logger.warning("webhook_signature_invalid", extra={"body_size": len(raw_body)})
        raise InvalidSignatureException()

    events = EventListResponse.model_validate_json(raw_body).events
    logger.debug("webhook_parsed", extra={"event_count": len(events)})
    return events
