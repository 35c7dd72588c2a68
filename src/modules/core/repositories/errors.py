"""Translation of database failures into the domain error taxonomy."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import structlog
from django.db import DatabaseError, IntegrityError

from modules.core.exceptions import ConflictError, InfrastructureError

logger = structlog.get_logger(__name__)


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise ORM errors as ``ConflictError`` / ``InfrastructureError``.

    ``IntegrityError`` means a uniqueness or FK violation at the store;
    anything else deriving from ``DatabaseError`` is an infrastructure
    failure.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.warning("db.integrity_error", operation=operation, error=str(exc))
        raise ConflictError("duplicate record.") from exc
    except DatabaseError as exc:
        logger.error("db.error", operation=operation, error=str(exc))
        raise InfrastructureError(f"{operation} failed: {exc}") from exc
