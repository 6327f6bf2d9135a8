from typing import Any, Dict

import structlog
from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.database import check_database_connection

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check database
    try:
        services["database"] = {
            "status": "up",
            "response_time_ms": check_database_connection(),
        }
    except DatabaseError as exc:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", error=str(exc))

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )
