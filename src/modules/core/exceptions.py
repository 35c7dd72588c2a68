"""Domain error taxonomy shared by every module.

Services raise one of these kinds (or a module-specific subclass) and
never a generic failure.  The API layer translates each kind into a
distinct HTTP status through ``modules.core.exception_handler``.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for all business-level errors."""

    status_code = 400
    default_code = "domain_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class DomainValidationError(DomainError):
    """Malformed or semantically illegal input (bad transition, bad quantity)."""

    status_code = 400
    default_code = "validation"


class NotFoundError(DomainError):
    """A referenced order, driver or user does not exist."""

    status_code = 404
    default_code = "not_found"


class UnauthorizedError(DomainError):
    """The caller's role or ownership does not allow the operation."""

    status_code = 403
    default_code = "unauthorized"


class ConflictError(DomainError):
    """Uniqueness violation reported by the store."""

    status_code = 409
    default_code = "conflict"


class InfrastructureError(DomainError):
    """The underlying store or another dependency failed."""

    status_code = 503
    default_code = "infrastructure"
