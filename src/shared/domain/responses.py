"""Uniform result envelope returned by application services.

Every service use-case answers with a ``ServiceResponse`` instead of raising:
the API layer reads ``sucesso`` and the presence of ``dados`` to pick an HTTP
status, and echoes the envelope as the response body.

``falha`` is a typed discriminator for failures.  It is excluded from
serialization, so the JSON body keeps the ``dados``/``mensagem``/``sucesso``
shape clients already consume.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")

MENSAGEM_NAO_ENCONTRADO = "Cliente não encontrado!"


class TipoFalha(StrEnum):
    """Failure kinds a service can report."""

    NAO_ENCONTRADO = "NAO_ENCONTRADO"
    INVALIDO = "INVALIDO"


class ServiceResponse(BaseModel, Generic[T]):
    """Immutable envelope: success flag, message and optional payload."""

    model_config = ConfigDict(frozen=True)

    dados: Optional[T] = None
    mensagem: str = ""
    sucesso: bool = True
    falha: Optional[TipoFalha] = Field(default=None, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _infer_falha(cls, data: Any) -> Any:
        """Failures built without a kind get one from their message.

        The not-found message maps to ``NAO_ENCONTRADO``; any other
        failure is ``INVALIDO``.
        """
        if not isinstance(data, dict):
            return data
        if data.get("sucesso", True) or data.get("falha") is not None:
            return data
        if data.get("mensagem") == MENSAGEM_NAO_ENCONTRADO:
            return {**data, "falha": TipoFalha.NAO_ENCONTRADO}
        return {**data, "falha": TipoFalha.INVALIDO}

    @classmethod
    def ok(cls, dados: Optional[T] = None, mensagem: str = "") -> ServiceResponse[T]:
        return cls(dados=dados, mensagem=mensagem, sucesso=True)

    @classmethod
    def erro(cls, falha: TipoFalha, mensagem: str) -> ServiceResponse[T]:
        return cls(dados=None, mensagem=mensagem, sucesso=False, falha=falha)

    @property
    def tem_dados(self) -> bool:
        """``True`` when the payload is present and, for collections, non-empty."""
        if self.dados is None:
            return False
        if isinstance(self.dados, (list, tuple)):
            return len(self.dados) > 0
        return True

    def to_representation(self) -> Dict[str, Any]:
        """JSON-ready body (camelCase payload fields)."""
        return self.model_dump(mode="json", by_alias=True)
