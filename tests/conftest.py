"""Configuração do pytest para o cliente NFConta."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from nfconta.api.connectors.nfconta import NFContaClient  # noqa: E402
from tests.fakes.fake_nfhub_transport import FakeNFHubTransport  # noqa: E402


@pytest.fixture
def transport() -> FakeNFHubTransport:
    """Transporte em memória; responde {200, {}} por padrão."""
    return FakeNFHubTransport()


@pytest.fixture
def client(transport: FakeNFHubTransport) -> NFContaClient:
    return NFContaClient(transport)
