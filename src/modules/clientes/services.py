"""Cliente service layer (Use Cases).

``IClienteService`` is the contract the HTTP layer depends on: seven
use-cases, each answering with a ``ServiceResponse`` envelope.
``ClienteService`` is the default implementation, delegating
persistence to an injected ``IClienteRepository``.

Failures never raise out of the service: domain exceptions are caught
here and turned into ``ServiceResponse.erro`` with a typed ``TipoFalha``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

import structlog
from django.db import IntegrityError, transaction

from modules.clientes.dtos import ClienteDTO, ClienteOutputDTO
from modules.clientes.exceptions import ClienteNaoEncontrado, EmailJaCadastrado
from modules.clientes.models import Cliente
from shared.domain.responses import MENSAGEM_NAO_ENCONTRADO, ServiceResponse, TipoFalha

if TYPE_CHECKING:
    from modules.clientes.repositories.interfaces import IClienteRepository

logger = structlog.get_logger(__name__)

CLIENTE_NAO_ENCONTRADO = MENSAGEM_NAO_ENCONTRADO
EMAIL_JA_CADASTRADO = "Email já cadastrado!"
NENHUM_CLIENTE = "Nenhum cliente cadastrado!"


class IClienteService(ABC):
    """Use-cases exposed over HTTP by ``ClienteViewSet``."""

    @abstractmethod
    def get_clientes(self) -> ServiceResponse[List[ClienteOutputDTO]]:
        """Return every cliente."""

    @abstractmethod
    def get_cliente_by_id(self, id: int) -> ServiceResponse[ClienteOutputDTO]:
        """Return a single cliente by primary key."""

    @abstractmethod
    def get_cliente_by_telefone(
        self, ddd: str, numero: str
    ) -> ServiceResponse[ClienteOutputDTO]:
        """Return the cliente owning the phone ``(ddd) numero``."""

    @abstractmethod
    def create_cliente(self, dto: ClienteDTO) -> ServiceResponse[ClienteOutputDTO]:
        """Create a cliente; the payload is the created record."""

    @abstractmethod
    def inativa_cliente(self, id: int) -> ServiceResponse[ClienteOutputDTO]:
        """Mark a cliente as inactive."""

    @abstractmethod
    def update_cliente(self, dto: ClienteDTO) -> ServiceResponse[ClienteOutputDTO]:
        """Replace the data of the cliente identified by ``dto.id``."""

    @abstractmethod
    def delete_cliente(self, email: str) -> ServiceResponse[List[ClienteOutputDTO]]:
        """Delete the cliente with ``email``; the payload is the remaining list."""


class ClienteService(IClienteService):
    """Application service for Cliente use-cases.

    Receives an ``IClienteRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IClienteRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_clientes(self) -> ServiceResponse[List[ClienteOutputDTO]]:
        clientes = self._todos()
        mensagem = "" if clientes else NENHUM_CLIENTE
        return ServiceResponse[List[ClienteOutputDTO]].ok(clientes, mensagem)

    def get_cliente_by_id(self, id: int) -> ServiceResponse[ClienteOutputDTO]:
        try:
            cliente = self._get_or_raise(id)
        except ClienteNaoEncontrado:
            logger.info("cliente.not_found", cliente_id=id)
            return self._nao_encontrado()
        logger.info("cliente.retrieved", cliente_id=id)
        return self._ok(cliente)

    def get_cliente_by_telefone(
        self, ddd: str, numero: str
    ) -> ServiceResponse[ClienteOutputDTO]:
        cliente = self._repo.get_by_telefone(ddd, numero)
        if cliente is None:
            logger.info("cliente.not_found_by_telefone", ddd=ddd)
            return self._nao_encontrado()
        return self._ok(cliente)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_cliente(self, dto: ClienteDTO) -> ServiceResponse[ClienteOutputDTO]:
        cliente = Cliente(
            nome=dto.nome,
            email=dto.email,
            tipo_cliente=dto.tipo_cliente,
            ativo=dto.ativo,
        )
        try:
            self._ensure_email_free(dto.email)
            cliente = self._save_unique(cliente)
        except EmailJaCadastrado:
            logger.warning("cliente.duplicate_email")
            return ServiceResponse[ClienteOutputDTO].erro(
                TipoFalha.INVALIDO, EMAIL_JA_CADASTRADO
            )

        self._repo.replace_telefones(cliente, dto.telefones)
        logger.info("cliente.created", cliente_id=cliente.pk)
        return self._ok(cliente, "Cliente criado com sucesso!")

    @transaction.atomic
    def inativa_cliente(self, id: int) -> ServiceResponse[ClienteOutputDTO]:
        try:
            cliente = self._get_or_raise(id)
        except ClienteNaoEncontrado:
            logger.info("cliente.not_found", cliente_id=id)
            return self._nao_encontrado()

        cliente.ativo = False
        cliente = self._repo.save(cliente)
        logger.info("cliente.deactivated", cliente_id=id)
        return self._ok(cliente, "Cliente inativado com sucesso!")

    @transaction.atomic
    def update_cliente(self, dto: ClienteDTO) -> ServiceResponse[ClienteOutputDTO]:
        log = logger.bind(cliente_id=dto.id)
        try:
            cliente = self._get_or_raise(dto.id)
            self._ensure_email_free(dto.email, exclude_id=cliente.pk)
        except ClienteNaoEncontrado:
            log.info("cliente.not_found")
            return self._nao_encontrado()
        except EmailJaCadastrado:
            log.warning("cliente.duplicate_email")
            return ServiceResponse[ClienteOutputDTO].erro(
                TipoFalha.INVALIDO, EMAIL_JA_CADASTRADO
            )

        cliente.nome = dto.nome
        cliente.email = dto.email
        cliente.tipo_cliente = dto.tipo_cliente
        cliente.ativo = dto.ativo
        try:
            cliente = self._save_unique(cliente)
        except EmailJaCadastrado:
            log.warning("cliente.duplicate_email")
            return ServiceResponse[ClienteOutputDTO].erro(
                TipoFalha.INVALIDO, EMAIL_JA_CADASTRADO
            )
        self._repo.replace_telefones(cliente, dto.telefones)
        log.info("cliente.updated")
        return self._ok(cliente, "Cliente atualizado com sucesso!")

    @transaction.atomic
    def delete_cliente(self, email: str) -> ServiceResponse[List[ClienteOutputDTO]]:
        cliente = self._repo.get_by_email(email)
        if cliente is None:
            logger.info("cliente.not_found_by_email", email=email)
            return ServiceResponse[List[ClienteOutputDTO]].erro(
                TipoFalha.NAO_ENCONTRADO, CLIENTE_NAO_ENCONTRADO
            )

        self._repo.delete(cliente.pk)
        logger.info("cliente.deleted", cliente_id=cliente.pk, email=email)
        return ServiceResponse[List[ClienteOutputDTO]].ok(
            self._todos(), "Cliente removido com sucesso!"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Cliente:
        cliente = self._repo.get_by_id(id)
        if cliente is None:
            raise ClienteNaoEncontrado(f"Cliente {id} not found.")
        return cliente

    def _ensure_email_free(self, email: str, exclude_id: int | None = None) -> None:
        existing = self._repo.get_by_email(email)
        if existing is not None and existing.pk != exclude_id:
            raise EmailJaCadastrado(email)

    def _save_unique(self, cliente: Cliente) -> Cliente:
        """Save inside a savepoint; a concurrent insert of the same email
        surfaces as ``EmailJaCadastrado``."""
        try:
            with transaction.atomic():
                return self._repo.save(cliente)
        except IntegrityError as exc:
            raise EmailJaCadastrado(cliente.email) from exc

    def _todos(self) -> List[ClienteOutputDTO]:
        return [ClienteOutputDTO.from_entity(c) for c in self._repo.list()]

    @staticmethod
    def _ok(cliente: Cliente, mensagem: str = "") -> ServiceResponse[ClienteOutputDTO]:
        return ServiceResponse[ClienteOutputDTO].ok(
            ClienteOutputDTO.from_entity(cliente), mensagem
        )

    @staticmethod
    def _nao_encontrado() -> ServiceResponse[ClienteOutputDTO]:
        return ServiceResponse[ClienteOutputDTO].erro(
            TipoFalha.NAO_ENCONTRADO, CLIENTE_NAO_ENCONTRADO
        )
