"""Cliente API views.

Exposes an ``IClienteService`` via HTTP using a DRF ViewSet.  Each
action makes exactly one service call and translates the returned
``ServiceResponse`` envelope into a status code:

- reads: ``sucesso`` → 200, otherwise 404;
- create: ``sucesso`` → 201 with ``Location``, otherwise 404 for
  ``TipoFalha.NAO_ENCONTRADO`` and 400 for any other failure;
- update / deactivate / delete: ``sucesso`` with data → 200, without
  data → 204, otherwise 404.

The envelope is the response body, unchanged.  The view never catches
exceptions raised by the service.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from drf_spectacular.utils import OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.clientes.dtos import ClienteDTO
from modules.clientes.repositories.django_repository import ClienteDjangoRepository
from modules.clientes.serializers import (
    ClienteSerializer,
    RespostaClienteSerializer,
    RespostaListaClientesSerializer,
)
from modules.clientes.services import ClienteService, IClienteService
from shared.domain.responses import ServiceResponse, TipoFalha

_NOT_FOUND = OpenApiResponse(RespostaClienteSerializer, description="Não Encontrado")
_NO_CONTENT = OpenApiResponse(description="Sucesso, sem dados para retornar")


class ClienteViewSet(ViewSet):
    """ViewSet for Cliente operations.

    The service is injected at construction time
    (``ClienteViewSet.as_view(actions, service=...)``); without one, the
    default ``ClienteService`` over ``ClienteDjangoRepository`` is used.
    """

    service: Optional[IClienteService] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ClienteService(repository=ClienteDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @extend_schema(responses={200: RespostaListaClientesSerializer})
    def list(self, request: Request) -> Response:
        """GET /api/cliente"""
        envelope = self.service.get_clientes()
        return self._render(envelope, status.HTTP_200_OK)

    @extend_schema(responses={200: RespostaClienteSerializer, 404: _NOT_FOUND})
    def retrieve(self, request: Request, id: int) -> Response:
        """GET /api/cliente/{id}"""
        envelope = self.service.get_cliente_by_id(id)
        return self._render_read(envelope)

    @extend_schema(responses={200: RespostaClienteSerializer, 404: _NOT_FOUND})
    def por_telefone(self, request: Request, ddd: str, numero: str) -> Response:
        """GET /api/cliente/{ddd}/{numero}"""
        envelope = self.service.get_cliente_by_telefone(ddd, numero)
        return self._render_read(envelope)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @extend_schema(
        request=ClienteSerializer,
        responses={
            201: RespostaClienteSerializer,
            400: OpenApiResponse(
                RespostaClienteSerializer, description="Requisição inválida"
            ),
            404: _NOT_FOUND,
        },
    )
    def create(self, request: Request) -> Response:
        """POST /api/cliente"""
        dto = self._parse_cliente(request)
        envelope = self.service.create_cliente(dto)

        if envelope.sucesso:
            body = envelope.to_representation()
            location = reverse(
                "cliente-detail",
                kwargs={"id": self._created_id(body, dto)},
                request=request,
            )
            return Response(
                body,
                status=status.HTTP_201_CREATED,
                headers={"Location": location},
            )
        if envelope.falha == TipoFalha.NAO_ENCONTRADO:
            return self._render(envelope, status.HTTP_404_NOT_FOUND)
        return self._render(envelope, status.HTTP_400_BAD_REQUEST)

    @extend_schema(
        request=None,
        responses={200: RespostaClienteSerializer, 204: _NO_CONTENT, 404: _NOT_FOUND},
    )
    def inativar(self, request: Request, id: int) -> Response:
        """PUT /api/cliente/InativarCliente/{id}"""
        envelope = self.service.inativa_cliente(id)
        return self._render_write(envelope, has_data=envelope.dados is not None)

    @extend_schema(
        request=ClienteSerializer,
        responses={200: RespostaClienteSerializer, 204: _NO_CONTENT, 404: _NOT_FOUND},
    )
    def update(self, request: Request) -> Response:
        """PUT /api/cliente"""
        dto = self._parse_cliente(request)
        envelope = self.service.update_cliente(dto)
        return self._render_write(envelope, has_data=envelope.dados is not None)

    @extend_schema(
        responses={
            200: RespostaListaClientesSerializer,
            204: _NO_CONTENT,
            404: _NOT_FOUND,
        },
    )
    def destroy(self, request: Request, email: str) -> Response:
        """DELETE /api/cliente/{email}"""
        envelope = self.service.delete_cliente(email)
        return self._render_write(envelope, has_data=envelope.tem_dados)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _render(envelope: ServiceResponse, status_code: int) -> Response:
        return Response(envelope.to_representation(), status=status_code)

    def _render_read(self, envelope: ServiceResponse) -> Response:
        if envelope.sucesso:
            return self._render(envelope, status.HTTP_200_OK)
        return self._render(envelope, status.HTTP_404_NOT_FOUND)

    def _render_write(self, envelope: ServiceResponse, has_data: bool) -> Response:
        if not envelope.sucesso:
            return self._render(envelope, status.HTTP_404_NOT_FOUND)
        if has_data:
            return self._render(envelope, status.HTTP_200_OK)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @staticmethod
    def _parse_cliente(request: Request) -> ClienteDTO:
        """Validate the body shape and build the service DTO."""
        serializer = ClienteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            return ClienteDTO.model_validate(dict(serializer.validated_data))
        except PydanticValidationError as exc:
            raise ValidationError(
                {
                    ".".join(str(part) for part in err["loc"]): [err["msg"]]
                    for err in exc.errors()
                }
            ) from exc

    @staticmethod
    def _created_id(body: Dict[str, Any], dto: ClienteDTO) -> int:
        dados = body.get("dados")
        if isinstance(dados, dict) and dados.get("id"):
            return dados["id"]
        return dto.id
