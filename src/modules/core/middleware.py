import time
import uuid
from contextvars import ContextVar
from typing import Any, Callable, Dict

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def _caller(request: HttpRequest) -> Dict[str, Any]:
    # DRF copies the JWT-authenticated user back onto the Django request.
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return {}
    return {"user_id": str(user.pk), "role": getattr(user, "role", None)}


class CorrelationIdMiddleware:
    """Tags every request with a correlation id and logs its outcome.

    The id comes from the ``X-Request-ID`` header, or is a fresh UUID4
    when the header is missing or blank.  It is bound into structlog's
    context vars for the duration of the request and echoed back on the
    response.  ``request_finished`` also carries the caller's id and role
    once authentication has run.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER, "").strip() or str(uuid.uuid4())
        correlation_id_var.set(cid)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.get_full_path())
        log.info("request_started")
        started_at = time.monotonic()

        response = self.get_response(request)

        log.info(
            "request_finished",
            status_code=response.status_code,
            latency_ms=round((time.monotonic() - started_at) * 1000, 2),
            **_caller(request),
        )
        response[REQUEST_ID_HEADER] = cid
        return response
