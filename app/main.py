"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (record store
creation), error handlers and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import (
    CandidateNotFoundError,
    CandidateValidationError,
    format_validation_errors,
)
from app.core.logging import setup_logging
from app.routers import candidates, filters, health, reports
from app.stores.factory import create_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    The candidate store lives on ``application.state`` for the lifetime of
    the process; a new lifespan starts with a new store.
    """
    setup_logging()
    logger.info("Application starting up")
    application.state.store = create_store(settings)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Podcast Guest Tracker API",
    description="Track, filter and report on podcast guest candidates",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------
_INVALID_INPUT_MESSAGES: dict[str, str] = {
    "body": "Invalid candidate data",
    "query": "Invalid filter parameters",
    "path": "Invalid candidate id",
}

# Body errors on these prefixes are not about a candidate payload
_BODY_MESSAGES_BY_PREFIX: dict[str, str] = {
    "/api/filters": "Invalid filter criteria",
}


def _invalid_input_message(path: str, source: str) -> str:
    if source == "body":
        for prefix, message in _BODY_MESSAGES_BY_PREFIX.items():
            if path.startswith(prefix):
                return message
    return _INVALID_INPUT_MESSAGES.get(source, "Invalid request")


@app.exception_handler(CandidateNotFoundError)
async def candidate_not_found_handler(
    request: Request, exc: CandidateNotFoundError
) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": "Candidate not found"})


@app.exception_handler(CandidateValidationError)
async def candidate_validation_handler(
    request: Request, exc: CandidateValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": exc.message, "error": exc.error},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = list(exc.errors())
    source = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else ""
    message = _invalid_input_message(request.url.path, source)
    return JSONResponse(
        status_code=400,
        content={"message": message, "error": format_validation_errors(errors)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/candidates", tags=["Candidates"])
app.include_router(filters.router, prefix="/api/filters", tags=["Filters"])
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])
