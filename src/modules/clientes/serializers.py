"""Cliente DRF serializers for API input and OpenAPI documentation.

The serializer operates at the Interface layer (API Views).
It only checks the *shape* of request bodies (types, required fields,
choices); business rules live in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.  Field names are camelCase on the wire
and map to snake_case via ``source``.

The ``Resposta*`` serializers describe the response envelope for
drf-spectacular; responses themselves are rendered from the envelope.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_serializer
from rest_framework import serializers

from modules.clientes.models import TipoCliente, TipoTelefone


class TelefoneSerializer(serializers.Serializer):
    ddd = serializers.CharField(max_length=3)
    numero = serializers.CharField(max_length=10)
    tipo = serializers.ChoiceField(
        choices=TipoTelefone.choices, default=TipoTelefone.FIXO
    )


class ClienteSerializer(serializers.Serializer):
    """Request body for create (``POST``) and update (``PUT``)."""

    id = serializers.IntegerField(required=False, default=0, min_value=0)
    nome = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    telefones = TelefoneSerializer(many=True, required=False, default=list)
    tipoCliente = serializers.ChoiceField(
        source="tipo_cliente",
        choices=TipoCliente.choices,
        default=TipoCliente.BRONZE,
    )
    ativo = serializers.BooleanField(required=False, default=True)
    dataDeAlteracao = serializers.DateTimeField(
        source="data_de_alteracao", required=False, allow_null=True
    )


class RespostaClienteSerializer(serializers.Serializer):
    dados = ClienteSerializer(allow_null=True)
    mensagem = serializers.CharField()
    sucesso = serializers.BooleanField()


@extend_schema_serializer(many=False)
class RespostaListaClientesSerializer(serializers.Serializer):
    dados = ClienteSerializer(many=True, allow_null=True)
    mensagem = serializers.CharField()
    sucesso = serializers.BooleanField()
