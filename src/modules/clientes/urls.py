"""Cliente URL configuration.

Explicit routes (no DefaultRouter): the same ``cliente/...`` prefix is
shared by an integer id, a ``{ddd}/{numero}`` pair and an email, each
bound to a different verb.  Order matters: typed converters first.

The collection answers with and without a trailing slash.
``cliente/InativarCliente/<id>`` is claimed by the deactivate route for
every verb, so a ``GET`` there is a 405 rather than a phone look-up.
"""

from __future__ import annotations

from django.urls import path

from modules.clientes.views import ClienteViewSet

cliente_collection = ClienteViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"}
)
cliente_inativar = ClienteViewSet.as_view({"put": "inativar"})
cliente_detail = ClienteViewSet.as_view({"get": "retrieve"})
cliente_telefone = ClienteViewSet.as_view({"get": "por_telefone"})
cliente_email = ClienteViewSet.as_view({"delete": "destroy"})

urlpatterns = [
    path("cliente", cliente_collection, name="cliente-list"),
    path("cliente/", cliente_collection),
    path(
        "cliente/InativarCliente/<int:id>",
        cliente_inativar,
        name="cliente-inativar",
    ),
    path("cliente/<int:id>", cliente_detail, name="cliente-detail"),
    path("cliente/<str:ddd>/<str:numero>", cliente_telefone, name="cliente-telefone"),
    path("cliente/<str:email>", cliente_email, name="cliente-email"),
]
