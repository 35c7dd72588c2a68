"""Audit sink interface.

The core calls ``record_event`` after each state-changing operation.
The call is synchronous: a failure propagates to the caller of the
triggering operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional
from uuid import UUID

if TYPE_CHECKING:
    from modules.audit.models import AuditEvent


class IAuditRepository(ABC):
    @abstractmethod
    def record_event(
        self,
        actor_id: Optional[UUID],
        entity: str,
        entity_id: Optional[UUID],
        action: str,
        details: Dict[str, Any],
    ) -> AuditEvent:
        """Append one event to the audit trail."""
