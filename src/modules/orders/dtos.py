"""Order DTOs for the Service Layer.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 models that
carry typed input from the API layer to ``OrderService``.  Business
rules (positive quantity, non-blank fields) are enforced by the service,
so the same rules apply whether the caller is a view, a management
command or a test.
"""

from __future__ import annotations

import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    zone: str
    scheduled_date: datetime.date
    time_slot: str
    quantity: int
    notes: Optional[str] = ""


class OrderListFilterDTO(BaseModel):
    """Filters accepted by ``OrderService.list_orders``.

    ``assignee_id`` is overridden with the caller's own id when the caller
    is a driver.
    """

    model_config = ConfigDict(frozen=True)

    scheduled_date: Optional[datetime.date] = None
    status: Optional[str] = None
    assignee_id: Optional[UUID] = None
