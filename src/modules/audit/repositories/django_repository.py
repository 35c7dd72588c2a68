"""Django ORM implementation of the audit sink."""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

import structlog

from modules.audit.models import AuditEvent
from modules.audit.repositories.interfaces import IAuditRepository
from modules.core.repositories.errors import translate_db_errors

logger = structlog.get_logger(__name__)


class AuditDjangoRepository(IAuditRepository):
    def record_event(
        self,
        actor_id: Optional[UUID],
        entity: str,
        entity_id: Optional[UUID],
        action: str,
        details: Dict[str, Any],
    ) -> AuditEvent:
        with translate_db_errors("audit.record_event"):
            event = AuditEvent.objects.create(
                actor_id=actor_id,
                entity=entity,
                entity_id=entity_id,
                action=action,
                details=details,
            )
        logger.info(
            "audit.recorded",
            entity=entity,
            entity_id=str(entity_id) if entity_id else None,
            action=action,
        )
        return event
