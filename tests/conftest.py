"""Configuração do pytest para o gocardless_client."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

# Adiciona src/ e a raiz do projeto ao PYTHONPATH para imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from gocardless_client import GoCardlessClient  # noqa: E402
from tests.fakes.mock_http import BASE_URL, MockHttp  # noqa: E402


@pytest.fixture
def mock_http() -> MockHttp:
    return MockHttp()


@pytest.fixture
def client(mock_http: MockHttp) -> GoCardlessClient:
    return GoCardlessClient.create(
        "access-token",
        base_url=BASE_URL,
        http_client=mock_http.client(),
        wait_between_retries_seconds=0,
    )


@pytest.fixture
def ec_key_pair() -> tuple[str, str]:
    """(private_pem, public_pem) de uma chave EC P-256 gerada na hora."""
    private_key = ec.generate_private_key(ec.SECP256R1())
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")
    return private_pem, public_pem
