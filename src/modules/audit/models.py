"""Append-only audit trail.

One ``AuditEvent`` row is written after every state-changing core
operation.  ``actor_id`` is nullable: ``None`` means the change was
performed by the system (e.g. the seed command).  ``entity_id`` is
nullable for entities without a natural id in the event.
"""

from __future__ import annotations

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from modules.audit.constants import AuditAction, AuditEntity
from modules.core.models import BaseModel


class AuditEvent(BaseModel):
    actor_id = models.UUIDField(null=True, blank=True)
    entity = models.CharField(max_length=50, choices=AuditEntity.choices)
    entity_id = models.UUIDField(null=True, blank=True)
    action = models.CharField(max_length=50, choices=AuditAction.choices)
    details = models.JSONField(default=dict, encoder=DjangoJSONEncoder)

    class Meta:
        db_table = "audit_events"
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["entity", "entity_id"],
                name="audit_entity_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.entity}:{self.entity_id} {self.action}"
