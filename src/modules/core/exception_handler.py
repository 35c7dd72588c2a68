"""DRF exception handling for domain errors.

``drf-standardized-errors`` renders every error response as
``{"type": ..., "errors": [{"code", "detail", "attr"}]}``.  This handler
class teaches it about ``DomainError`` so services can raise business
errors without knowing anything about HTTP.
"""

from __future__ import annotations

import structlog
from drf_standardized_errors.handler import ExceptionHandler
from rest_framework.exceptions import APIException

from modules.core.exceptions import DomainError, InfrastructureError

logger = structlog.get_logger(__name__)


class DomainAPIException(APIException):
    """API exception carrying the status code of the wrapped domain error."""

    def __init__(self, error: DomainError) -> None:
        super().__init__(detail=str(error), code=error.default_code)
        self.status_code = error.status_code


class DomainExceptionHandler(ExceptionHandler):
    """Maps each ``DomainError`` kind to its HTTP status."""

    def convert_known_exceptions(self, exc: Exception) -> Exception:
        if isinstance(exc, DomainError):
            if isinstance(exc, InfrastructureError):
                logger.error("domain.infrastructure_error", error=str(exc))
            return DomainAPIException(exc)
        return super().convert_known_exceptions(exc)
