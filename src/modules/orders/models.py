"""Order model.

- Created in PENDING with no assignee.
- ``assignee`` is set only by dispatch assignment, so it is non-null only
  once the order has left PENDING.
- ``quantity`` is a positive number of cylinders (check constraint).
- Orders are never deleted; DELIVERED orders stay for reporting.  The
  assignee FK uses PROTECT so a driver with history cannot be removed.
"""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus


class Order(BaseModel):
    address: models.CharField = models.CharField(max_length=255)
    zone: models.CharField = models.CharField(max_length=100)
    scheduled_date: models.DateField = models.DateField()
    time_slot: models.CharField = models.CharField(max_length=50)
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    notes: models.TextField = models.TextField(blank=True, default="")
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    assignee: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="assigned_orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["scheduled_date", "created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(
                fields=["scheduled_date", "created_at"],
                name="orders_schedule_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="orders_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.address} [{self.zone}] {self.scheduled_date} ({self.status})"
