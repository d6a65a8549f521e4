"""Cliente domain exceptions.

Raised inside the Service Layer when business rules are violated and
converted there into failure envelopes (``ServiceResponse.erro``), so
they never reach the API layer.
"""

from __future__ import annotations


class ClienteNaoEncontrado(Exception):
    """The requested cliente does not exist."""


class EmailJaCadastrado(Exception):
    """Another cliente already uses this email address."""
