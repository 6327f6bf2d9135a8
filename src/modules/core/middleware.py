import threading
import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.conf import settings
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID and log its outcome.

    Reads the X-Request-ID header from the incoming request, or generates
    a UUID4 when absent.  The ID is bound into structlog's contextvars so
    every log line emitted while handling the request carries it, and is
    echoed back in the X-Request-ID response header.  Server errors are
    logged at error level with the request duration.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.get_full_path())
        log.info("request_started")
        start = time.monotonic()

        response = self.get_response(request)

        duration_ms = round((time.monotonic() - start) * 1000, 2)
        log_method = log.error if response.status_code >= 500 else log.info
        log_method(
            "request_finished",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response[REQUEST_ID_HEADER] = cid
        return response


class ConnectionLimitMiddleware:
    """Admit at most ``DB_POOL_SIZE`` requests at a time.

    Each request thread holds its own database connection, so capping the
    requests in flight caps the open connections.  Excess requests block
    until a slot frees up instead of being rejected.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.slots = threading.BoundedSemaphore(settings.DB_POOL_SIZE)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        with self.slots:
            return self.get_response(request)
