"""Delivery DTOs.

Quantities are plain ints here: the non-negative rule is enforced by
``DeliveryService`` so that it holds for every caller.
"""

from __future__ import annotations

import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class RegisterDeliveryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: UUID
    llenas_entregadas: int
    vacias_recibidas: int
    notes: Optional[str] = ""


class RegisterFailedDeliveryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: UUID
    reason: str
    reprogram_date: Optional[datetime.date] = None
    reprogram_time_slot: Optional[str] = None
