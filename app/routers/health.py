"""Health check endpoint.

Returns service status including record store connectivity.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> Any:
    """Return health status including a real store connectivity test.

    Returns 200 OK when healthy, 503 when the store cannot be reached.
    """
    store_status = "disconnected"

    try:
        if request.app.state.store.ping():
            store_status = "connected"
    except Exception:
        logger.warning("Health check: store ping failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if store_status == "connected" else "degraded",
        "store": store_status,
        "backend": settings.STORE_BACKEND,
    }

    if store_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
