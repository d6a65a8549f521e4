"""Django ORM implementation of the Cliente repository.

Satisfies ``IClienteRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into a response envelope.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog
from django.db import transaction

from modules.clientes.dtos import TelefoneDTO
from modules.clientes.models import Cliente, Telefone
from modules.clientes.repositories.interfaces import IClienteRepository

logger = structlog.get_logger(__name__)


class ClienteDjangoRepository(IClienteRepository):
    """Concrete Cliente repository backed by Django ORM."""

    def _queryset(self):
        return Cliente.objects.prefetch_related("telefones")

    def get_by_id(self, id: int) -> Optional[Cliente]:
        """Retrieve a cliente by primary key, with its phones."""
        return self._queryset().filter(id=id).first()

    def list(self) -> List[Cliente]:
        return list(self._queryset().order_by("id"))

    @transaction.atomic
    def save(self, entity: Cliente) -> Cliente:
        """Persist (create or update) a cliente."""
        is_new = entity.pk is None
        entity.save()
        logger.info("cliente.saved", cliente_id=entity.pk, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a cliente and its phones.

        Returns ``True`` if the cliente was found and removed,
        ``False`` if no cliente exists with the given ID.
        """
        deleted, _ = Cliente.objects.filter(id=id).delete()
        if not deleted:
            return False
        logger.info("cliente.deleted", cliente_id=id)
        return True

    def get_by_email(self, email: str) -> Optional[Cliente]:
        return self._queryset().filter(email__iexact=email).first()

    def get_by_telefone(self, ddd: str, numero: str) -> Optional[Cliente]:
        return (
            self._queryset()
            .filter(telefones__ddd=ddd, telefones__numero=numero)
            .distinct()
            .first()
        )

    @transaction.atomic
    def replace_telefones(
        self, cliente: Cliente, telefones: Sequence[TelefoneDTO]
    ) -> None:
        Telefone.objects.filter(cliente=cliente).delete()
        Telefone.objects.bulk_create(
            [
                Telefone(cliente=cliente, ddd=t.ddd, numero=t.numero, tipo=t.tipo)
                for t in telefones
            ]
        )
        # Drop the stale prefetch cache so callers see the new phones.
        prefetched = getattr(cliente, "_prefetched_objects_cache", None)
        if prefetched:
            prefetched.pop("telefones", None)
