"""Cliente DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``) and
serialize with camelCase aliases (``tipoCliente``, ``dataDeAlteracao``),
the wire format clients of this API expect.

- ``TelefoneDTO``: a phone entry (input and output).
- ``ClienteDTO``: input for create/update.
- ``ClienteOutputDTO``: output built from a ``Cliente`` entity.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.clientes.models import Cliente


_CAMEL = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Enums (framework-agnostic, not Django TextChoices)
# ---------------------------------------------------------------------------


class TipoClienteEnum(StrEnum):
    BRONZE = "Bronze"
    PRATA = "Prata"
    OURO = "Ouro"


class TipoTelefoneEnum(StrEnum):
    FIXO = "Fixo"
    CELULAR = "Celular"


# ---------------------------------------------------------------------------
# Telefone
# ---------------------------------------------------------------------------


class TelefoneDTO(BaseModel):
    model_config = _CAMEL

    ddd: str
    numero: str
    tipo: TipoTelefoneEnum = TipoTelefoneEnum.FIXO


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ClienteDTO(BaseModel):
    """Immutable DTO for create and update requests.

    ``id`` is ignored on create (expected ``0``) and identifies the
    target on update.  ``data_de_alteracao`` is accepted for wire
    compatibility but the server always sets it.
    """

    model_config = _CAMEL

    id: int = 0
    nome: str
    email: EmailStr
    telefones: List[TelefoneDTO] = []
    tipo_cliente: TipoClienteEnum = TipoClienteEnum.BRONZE
    ativo: bool = True
    data_de_alteracao: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ClienteOutputDTO(BaseModel):
    """Immutable DTO for Cliente API responses."""

    model_config = _CAMEL

    id: int
    nome: str
    email: str
    telefones: List[TelefoneDTO]
    tipo_cliente: str
    ativo: bool
    data_de_alteracao: datetime

    @classmethod
    def from_entity(cls, cliente: Cliente) -> ClienteOutputDTO:
        """Build an output DTO from a Cliente model instance."""
        return cls(
            id=cliente.id,
            nome=cliente.nome,
            email=cliente.email,
            telefones=[
                TelefoneDTO(ddd=t.ddd, numero=t.numero, tipo=t.tipo)
                for t in cliente.telefones.all()
            ],
            tipo_cliente=cliente.tipo_cliente,
            ativo=cliente.ativo,
            data_de_alteracao=cliente.data_de_alteracao,
        )
