"""Dispatch domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainValidationError, NotFoundError


class EmptyAssignment(DomainValidationError):
    """An assignment batch must reference at least one order."""

    default_code = "empty_assignment"


class DriverNotFound(NotFoundError):
    """The driver does not exist or is inactive."""

    default_code = "driver_not_found"

