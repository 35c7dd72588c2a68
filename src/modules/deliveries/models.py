"""Delivery outcomes.

Both models are immutable once written:

- ``Delivery``: a successful drop-off.  It makes the order DELIVERED.  A
  delivered order that dispatch reassigns can be delivered again, so an
  order may have one ``Delivery`` per delivery cycle, and each one counts
  towards the stock totals.
- ``FailedDelivery``: an unsuccessful attempt with a mandatory reason and
  an optional reschedule target.  An order may collect many of these.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Delivery(BaseModel):
    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="deliveries",
    )
    llenas_entregadas: models.PositiveIntegerField = models.PositiveIntegerField()
    vacias_recibidas: models.PositiveIntegerField = models.PositiveIntegerField()
    notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "deliveries"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="deliveries_created_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"{self.order_id}: {self.llenas_entregadas} llenas / "
            f"{self.vacias_recibidas} vacias"
        )


class FailedDelivery(BaseModel):
    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="failed_deliveries",
    )
    reason: models.TextField = models.TextField()
    reprogram_date: models.DateField = models.DateField(null=True, blank=True)
    reprogram_time_slot: models.CharField = models.CharField(  # noqa: DJ01
        max_length=50,
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "failed_deliveries"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.order_id}: {self.reason}"
