"""Module: health."""

import time

from fastapi import APIRouter

from petcare.core.config import settings
from petcare.core.timeutils import utcnow

router = APIRouter()

STARTED_AT = time.monotonic()


def health_payload() -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "uptime_seconds": round(time.monotonic() - STARTED_AT, 3),
        "timestamp": utcnow().isoformat() + "Z",
    }


# Endpoint: lightweight health probe for service liveness.
@router.get("", summary="Service status")
def health():
    return {"success": True, "message": "Server is running", **health_payload()}
