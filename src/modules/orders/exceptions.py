"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.  Each one
subclasses a ``DomainError`` kind, which fixes its HTTP status code.
"""

from __future__ import annotations

from modules.core.exceptions import (
    DomainValidationError,
    NotFoundError,
    UnauthorizedError,
)


class OrderNotFound(NotFoundError):
    """The requested order does not exist."""

    default_code = "order_not_found"


class InvalidOrderStatus(DomainValidationError):
    """A status transition outside the lifecycle table was attempted."""

    default_code = "invalid_status_transition"


class InvalidOrderData(DomainValidationError):
    """Order intake data is incomplete or out of range."""

    default_code = "invalid_order"


class OrderAccessDenied(UnauthorizedError):
    """A driver tried to read an order assigned to someone else."""

    default_code = "order_access_denied"
