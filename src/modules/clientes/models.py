"""Cliente aggregate: the customer and its phone numbers.

- ``Cliente.email`` is unique and is the key used by the delete route.
- ``Telefone`` rows belong to exactly one Cliente and are removed with it.
- ``data_de_alteracao`` (inherited from TimestampedModel) tracks the last write.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class TipoCliente(models.TextChoices):
    BRONZE = "Bronze", "Bronze"
    PRATA = "Prata", "Prata"
    OURO = "Ouro", "Ouro"


class TipoTelefone(models.TextChoices):
    FIXO = "Fixo", "Fixo"
    CELULAR = "Celular", "Celular"


class Cliente(TimestampedModel):
    """Customer aggregate root."""

    nome = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    tipo_cliente = models.CharField(
        max_length=10,
        choices=TipoCliente.choices,
        default=TipoCliente.BRONZE,
    )
    ativo = models.BooleanField(default=True)

    class Meta:
        db_table = "clientes"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["ativo"], name="clientes_ativo_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.nome} (#{self.pk})"


class Telefone(models.Model):
    """Phone entry embedded in a Cliente."""

    cliente = models.ForeignKey(
        Cliente,
        on_delete=models.CASCADE,
        related_name="telefones",
    )
    ddd = models.CharField(max_length=3)
    numero = models.CharField(max_length=10)
    tipo = models.CharField(
        max_length=10,
        choices=TipoTelefone.choices,
        default=TipoTelefone.FIXO,
    )

    class Meta:
        db_table = "telefones"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["ddd", "numero"], name="telefones_ddd_numero_idx"),
        ]

    def __str__(self) -> str:
        return f"({self.ddd}) {self.numero} [{self.tipo}]"
