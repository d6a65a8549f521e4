"""OpenAPI schema generation for the Cliente routes."""

import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    def test_schema_lists_cliente_routes(self, client):
        response = client.get("/api/schema/", HTTP_ACCEPT="application/json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/cliente" in paths
        assert "/api/cliente/{id}" in paths
        assert "/api/cliente/{ddd}/{numero}" in paths
        assert "/api/cliente/InativarCliente/{id}" in paths
        assert "/api/cliente/{email}" in paths

    def test_create_documents_status_codes(self, client):
        response = client.get("/api/schema/", HTTP_ACCEPT="application/json")
        post = response.json()["paths"]["/api/cliente"]["post"]
        assert {"201", "400", "404"} <= set(post["responses"])
