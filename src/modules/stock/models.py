"""Stock ledger.

``StockInbound`` rows are the only record of full cylinders entering
the depot.  The ledger is append-only: rows are never updated or
deleted, and every stock figure is recomputed from it on demand.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class StockInbound(BaseModel):
    inbound_date: models.DateField = models.DateField()
    cantidad_llenas: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "stock_inbounds"
        ordering = ["inbound_date", "created_at"]
        indexes = [
            models.Index(fields=["inbound_date"], name="stock_inbound_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(cantidad_llenas__gte=1),
                name="stock_inbounds_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.inbound_date}: +{self.cantidad_llenas} llenas"
