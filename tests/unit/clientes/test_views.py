"""Unit tests for ClienteViewSet status-code mapping.

The service is a ``MagicMock`` injected through ``as_view(service=...)``,
so these tests cover only the envelope → HTTP translation:

- exactly one service call per request, envelope echoed as body;
- create: 201 + Location, 404 for not-found failures, 400 otherwise;
- update / deactivate: 200 with data, 204 without, 404 on failure;
- delete: 200 with a non-empty list, 204 with empty/absent, 404 on failure.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIRequestFactory

from modules.clientes.services import CLIENTE_NAO_ENCONTRADO, IClienteService
from modules.clientes.views import ClienteViewSet
from shared.domain.responses import ServiceResponse, TipoFalha

pytestmark = pytest.mark.unit

CLIENTE = {
    "id": 5,
    "nome": "Ana Souza",
    "email": "ana@example.com",
    "telefones": [{"ddd": "11", "numero": "33334444", "tipo": "Fixo"}],
    "tipoCliente": "Ouro",
    "ativo": True,
    "dataDeAlteracao": "2024-01-16T21:37:50.884000Z",
}

PAYLOAD = {
    "id": 0,
    "nome": "Ana Souza",
    "email": "ana@example.com",
    "telefones": [{"ddd": "11", "numero": "33334444", "tipo": "Fixo"}],
    "tipoCliente": "Ouro",
    "ativo": True,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture()
def service() -> MagicMock:
    return MagicMock(spec=IClienteService)


def _view(service, actions):
    return ClienteViewSet.as_view(actions, service=service)


def _not_found() -> ServiceResponse:
    return ServiceResponse.erro(TipoFalha.NAO_ENCONTRADO, CLIENTE_NAO_ENCONTRADO)


# ===========================================================================
# Injection
# ===========================================================================


class TestServiceInjection:
    def test_uses_injected_service(self, service):
        view = ClienteViewSet(service=service)
        assert view.service is service

    def test_builds_default_service_without_injection(self):
        from modules.clientes.services import ClienteService

        view = ClienteViewSet()
        assert isinstance(view.service, ClienteService)


# ===========================================================================
# LIST
# ===========================================================================


class TestList:
    def test_returns_200_with_envelope(self, factory, service):
        envelope = ServiceResponse.ok([CLIENTE])
        service.get_clientes.return_value = envelope

        response = _view(service, {"get": "list"})(factory.get("/api/cliente"))

        assert response.status_code == 200
        assert response.data == envelope.to_representation()
        service.get_clientes.assert_called_once_with()

    def test_empty_list_is_still_200(self, factory, service):
        service.get_clientes.return_value = ServiceResponse.ok(
            [], "Nenhum cliente cadastrado!"
        )

        response = _view(service, {"get": "list"})(factory.get("/api/cliente"))

        assert response.status_code == 200
        assert response.data["dados"] == []


# ===========================================================================
# RETRIEVE / POR TELEFONE
# ===========================================================================


class TestRetrieve:
    def test_found_returns_200_verbatim(self, factory, service):
        envelope = ServiceResponse.ok(CLIENTE)
        service.get_cliente_by_id.return_value = envelope

        response = _view(service, {"get": "retrieve"})(
            factory.get("/api/cliente/5"), id=5
        )

        assert response.status_code == 200
        assert response.data == {"dados": CLIENTE, "mensagem": "", "sucesso": True}
        service.get_cliente_by_id.assert_called_once_with(5)

    def test_not_found_returns_404(self, factory, service):
        service.get_cliente_by_id.return_value = _not_found()

        response = _view(service, {"get": "retrieve"})(
            factory.get("/api/cliente/999"), id=999
        )

        assert response.status_code == 404
        assert response.data == {
            "dados": None,
            "mensagem": CLIENTE_NAO_ENCONTRADO,
            "sucesso": False,
        }


class TestPorTelefone:
    def test_found_returns_200(self, factory, service):
        service.get_cliente_by_telefone.return_value = ServiceResponse.ok(CLIENTE)

        response = _view(service, {"get": "por_telefone"})(
            factory.get("/api/cliente/11/33334444"), ddd="11", numero="33334444"
        )

        assert response.status_code == 200
        service.get_cliente_by_telefone.assert_called_once_with("11", "33334444")

    def test_not_found_returns_404(self, factory, service):
        service.get_cliente_by_telefone.return_value = _not_found()

        response = _view(service, {"get": "por_telefone"})(
            factory.get("/api/cliente/11/00000000"), ddd="11", numero="00000000"
        )

        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestCreate:
    def _post(self, factory, service, payload=PAYLOAD):
        request = factory.post("/api/cliente", payload, format="json")
        return _view(service, {"post": "create"})(request)

    def test_success_returns_201_with_location(self, factory, service):
        envelope = ServiceResponse.ok(CLIENTE, "Cliente criado com sucesso!")
        service.create_cliente.return_value = envelope

        response = self._post(factory, service)

        assert response.status_code == 201
        assert response["Location"].endswith("/api/cliente/5")
        assert response.data == envelope.to_representation()
        service.create_cliente.assert_called_once()

    def test_location_falls_back_to_submitted_id(self, factory, service):
        service.create_cliente.return_value = ServiceResponse.ok()

        response = self._post(factory, service, {**PAYLOAD, "id": 7})

        assert response.status_code == 201
        assert response["Location"].endswith("/api/cliente/7")

    def test_passes_parsed_dto_to_service(self, factory, service):
        service.create_cliente.return_value = ServiceResponse.ok(CLIENTE)

        self._post(factory, service)

        dto = service.create_cliente.call_args.args[0]
        assert dto.nome == "Ana Souza"
        assert dto.email == "ana@example.com"
        assert dto.tipo_cliente == "Ouro"
        assert dto.telefones[0].numero == "33334444"

    def test_not_found_failure_returns_404(self, factory, service):
        service.create_cliente.return_value = _not_found()

        response = self._post(factory, service)

        assert response.status_code == 404
        assert response.data["mensagem"] == CLIENTE_NAO_ENCONTRADO

    def test_other_failure_returns_400(self, factory, service):
        service.create_cliente.return_value = ServiceResponse.erro(
            TipoFalha.INVALIDO, "Email já cadastrado!"
        )

        response = self._post(factory, service)

        assert response.status_code == 400
        assert response.data["sucesso"] is False

    def test_untyped_not_found_failure_returns_404(self, factory, service):
        service.create_cliente.return_value = ServiceResponse(
            sucesso=False, mensagem=CLIENTE_NAO_ENCONTRADO
        )

        response = self._post(factory, service)

        assert response.status_code == 404
        assert response.data == {
            "dados": None,
            "mensagem": CLIENTE_NAO_ENCONTRADO,
            "sucesso": False,
        }

    def test_untyped_other_failure_returns_400(self, factory, service):
        service.create_cliente.return_value = ServiceResponse(
            sucesso=False, mensagem="Dados inválidos"
        )

        response = self._post(factory, service)

        assert response.status_code == 400

    def test_malformed_body_returns_400_without_calling_service(
        self, factory, service
    ):
        response = self._post(factory, service, {"nome": "Sem email"})

        assert response.status_code == 400
        service.create_cliente.assert_not_called()

    def test_failure_kind_is_not_serialized(self, factory, service):
        service.create_cliente.return_value = _not_found()

        response = self._post(factory, service)

        assert set(response.data) == {"dados", "mensagem", "sucesso"}


# ===========================================================================
# INATIVAR / UPDATE
# ===========================================================================


class TestInativar:
    def _put(self, factory, service, id=5):
        request = factory.put(f"/api/cliente/InativarCliente/{id}")
        return _view(service, {"put": "inativar"})(request, id=id)

    def test_with_payload_returns_200(self, factory, service):
        service.inativa_cliente.return_value = ServiceResponse.ok(
            {**CLIENTE, "ativo": False}
        )

        response = self._put(factory, service)

        assert response.status_code == 200
        assert response.data["dados"]["ativo"] is False
        service.inativa_cliente.assert_called_once_with(5)

    def test_without_payload_returns_204(self, factory, service):
        service.inativa_cliente.return_value = ServiceResponse.ok()

        response = self._put(factory, service)

        assert response.status_code == 204
        assert response.data is None

    def test_failure_returns_404_even_with_payload(self, factory, service):
        service.inativa_cliente.return_value = ServiceResponse(
            dados=CLIENTE, mensagem="falhou", sucesso=False
        )

        response = self._put(factory, service)

        assert response.status_code == 404


class TestUpdate:
    def _put(self, factory, service, payload=None):
        body = payload or {**PAYLOAD, "id": 5}
        request = factory.put("/api/cliente", body, format="json")
        return _view(service, {"put": "update"})(request)

    def test_with_payload_returns_200(self, factory, service):
        service.update_cliente.return_value = ServiceResponse.ok(CLIENTE)

        response = self._put(factory, service)

        assert response.status_code == 200
        assert service.update_cliente.call_args.args[0].id == 5

    def test_without_payload_returns_204(self, factory, service):
        service.update_cliente.return_value = ServiceResponse.ok()

        response = self._put(factory, service)

        assert response.status_code == 204

    def test_failure_returns_404(self, factory, service):
        service.update_cliente.return_value = ServiceResponse.erro(
            TipoFalha.INVALIDO, "Email já cadastrado!"
        )

        response = self._put(factory, service)

        assert response.status_code == 404


# ===========================================================================
# DESTROY
# ===========================================================================


class TestDestroy:
    def _delete(self, factory, service, email="a@b.com"):
        request = factory.delete(f"/api/cliente/{email}")
        return _view(service, {"delete": "destroy"})(request, email=email)

    def test_non_empty_list_returns_200(self, factory, service):
        service.delete_cliente.return_value = ServiceResponse.ok([CLIENTE])

        response = self._delete(factory, service)

        assert response.status_code == 200
        assert response.data["dados"] == [CLIENTE]
        service.delete_cliente.assert_called_once_with("a@b.com")

    def test_empty_list_returns_204_with_empty_body(self, factory, service):
        service.delete_cliente.return_value = ServiceResponse.ok([])

        response = self._delete(factory, service)
        response.render()

        assert response.status_code == 204
        assert response.content == b""

    def test_absent_payload_returns_204(self, factory, service):
        service.delete_cliente.return_value = ServiceResponse.ok(None)

        response = self._delete(factory, service)

        assert response.status_code == 204

    def test_failure_returns_404(self, factory, service):
        service.delete_cliente.return_value = _not_found()

        response = self._delete(factory, service)

        assert response.status_code == 404
