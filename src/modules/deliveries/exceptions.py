"""Delivery domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainValidationError, UnauthorizedError


class InvalidDeliveryQuantities(DomainValidationError):
    default_code = "invalid_delivery_quantities"


class OrderNotDeliverable(DomainValidationError):
    """The order is not ASSIGNED or IN_TRANSIT."""

    default_code = "order_not_deliverable"


class MissingFailureReason(DomainValidationError):
    default_code = "missing_failure_reason"


class DeliveryAccessDenied(UnauthorizedError):
    """A driver tried to report on an order assigned to someone else."""

    default_code = "delivery_access_denied"
