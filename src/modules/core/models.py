"""Base abstract models shared by the domain modules.

Provides ``TimestampedModel``: an integer primary key plus a
``data_de_alteracao`` timestamp refreshed on every save.
"""

from __future__ import annotations

from django.db import models


class TimestampedModel(models.Model):
    """Abstract base with last-modification bookkeeping."""

    data_de_alteracao = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``data_de_alteracao`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "data_de_alteracao" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["data_de_alteracao"]
        super().save(*args, **kwargs)
