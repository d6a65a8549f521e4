import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_cliente():
    """Factory persisting a Cliente; ``telefones`` is a list of (ddd, numero, tipo)."""
    from modules.clientes.models import Cliente, Telefone, TipoCliente

    def _make(telefones=(("11", "33334444", "Fixo"),), **overrides):
        defaults = {
            "nome": "João Silva",
            "email": "joao@example.com",
            "tipo_cliente": TipoCliente.OURO,
        }
        defaults.update(overrides)
        cliente = Cliente.objects.create(**defaults)
        for ddd, numero, tipo in telefones:
            Telefone.objects.create(cliente=cliente, ddd=ddd, numero=numero, tipo=tipo)
        return cliente

    return _make
