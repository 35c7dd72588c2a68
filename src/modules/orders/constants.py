"""Order domain constants.

Defines status choices and the order lifecycle transition table.  The
table is the single source of truth for which status changes are legal
through ``change_status``.  Dispatch moves any order to ASSIGNED and
delivery embeds its own checks against ``DELIVERABLE_STATES``.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pendiente"
    ASSIGNED = "ASSIGNED", "Asignado"
    IN_TRANSIT = "IN_TRANSIT", "En reparto"
    DELIVERED = "DELIVERED", "Entregado"


VALID_TRANSITIONS: dict[str, frozenset[str]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.ASSIGNED}),
    OrderStatus.ASSIGNED: frozenset({OrderStatus.IN_TRANSIT, OrderStatus.DELIVERED}),
    OrderStatus.IN_TRANSIT: frozenset({OrderStatus.ASSIGNED, OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
}

# Statuses from which a delivery outcome (success or failure) may be recorded.
DELIVERABLE_STATES: frozenset[str] = frozenset(
    {OrderStatus.ASSIGNED, OrderStatus.IN_TRANSIT}
)


def can_transition(current: str, target: str) -> bool:
    """Return ``True`` iff ``current -> target`` is a legal status change."""
    return target in VALID_TRANSITIONS.get(current, frozenset())
