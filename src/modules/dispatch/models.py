"""Assignment history.

One row per order per dispatch batch.  The order's current driver lives
on ``Order.assignee``; these rows keep every past assignment, including
re-assignments after a failed delivery.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from modules.core.models import BaseModel


class Assignment(BaseModel):
    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="assignments",
    )
    driver: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="assignments",
    )

    class Meta:
        db_table = "assignments"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.order_id} -> {self.driver_id}"
