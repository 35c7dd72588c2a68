"""Audit repositories package."""

from modules.audit.repositories.django_repository import AuditDjangoRepository
from modules.audit.repositories.interfaces import IAuditRepository

__all__ = ["AuditDjangoRepository", "IAuditRepository"]
