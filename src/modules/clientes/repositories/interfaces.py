"""Cliente repository interface.

Extends ``IRepository[Cliente]`` with the look-ups the routes need:
by email (delete, uniqueness) and by phone number.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.clientes.dtos import TelefoneDTO
    from modules.clientes.models import Cliente


class IClienteRepository(IRepository["Cliente"]):
    """Repository contract for the Cliente aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Cliente]:
        """Retrieve a cliente by email address."""

    @abstractmethod
    def get_by_telefone(self, ddd: str, numero: str) -> Optional[Cliente]:
        """Retrieve the cliente owning the given phone number."""

    @abstractmethod
    def replace_telefones(
        self, cliente: Cliente, telefones: Sequence[TelefoneDTO]
    ) -> None:
        """Replace every phone entry of ``cliente`` with ``telefones``."""
