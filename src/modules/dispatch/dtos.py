"""Dispatch DTOs."""

from __future__ import annotations

from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class AssignOrdersDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_ids: List[UUID]
    driver_id: UUID
