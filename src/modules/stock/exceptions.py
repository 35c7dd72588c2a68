"""Stock domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainValidationError


class InvalidInboundQuantity(DomainValidationError):
    """Inbound batches must contain at least one full cylinder."""

    default_code = "invalid_inbound_quantity"
