"""Unit tests for database error translation."""

from __future__ import annotations

import pytest
from django.db import DatabaseError, IntegrityError

from modules.core.exceptions import ConflictError, InfrastructureError
from modules.core.repositories.errors import translate_db_errors

pytestmark = pytest.mark.unit


def test_integrity_error_becomes_conflict():
    with pytest.raises(ConflictError) as exc_info:
        with translate_db_errors("test.op"):
            raise IntegrityError("UNIQUE constraint failed")
    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_database_error_becomes_infrastructure():
    with pytest.raises(InfrastructureError, match="test.op"):
        with translate_db_errors("test.op"):
            raise DatabaseError("connection lost")


def test_other_errors_pass_through():
    with pytest.raises(KeyError):
        with translate_db_errors("test.op"):
            raise KeyError("address")
