"""Constantes de identificação do cliente e cabeçalhos HTTP."""

CLIENT_LIBRARY = "gocardless-python"
CLIENT_VERSION = "1.0.0"

AUTHORIZATION_HEADER = "Authorization"
IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"
API_VERSION_HEADER = "GoCardless-Version"
CLIENT_VERSION_HEADER = "GoCardless-Client-Version"
CLIENT_LIBRARY_HEADER = "GoCardless-Client-Library"

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Razão do sub-erro que indica recurso já criado com a mesma Idempotency-Key
IDEMPOTENT_CREATION_CONFLICT = "idempotent_creation_conflict"
CONFLICTING_RESOURCE_LINK = "conflicting_resource_id"
