# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Welcome Desk Service
====================
Bilingual visitor intake for a church welcome desk. Stores visitor
submissions, emails the ministry leader for the visitor's age group, and
serves the branding / notification settings edited from the admin panel.

Submission pipeline:
    received ─► validated ─► persisted ─► notified | skipped ─► complete

Port: 8000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from welcome_desk.controllers import (
    settings_controller,
    system_controller,
    upload_controller,
    visitor_controller,
)
from welcome_desk.core.config import settings
from welcome_desk.core.database import engine, init_schema
from welcome_desk.core.errors import ValidationError, WelcomeDeskError
from welcome_desk.core.logging import get_logger
from welcome_desk.middleware import MetricsMiddleware, RequestIDMiddleware
from welcome_desk.schemas import ErrorResponse

logger = get_logger("welcome-desk")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Create tables at startup when the store is configured; dispose the pool on shutdown."""
    if engine is None:
        logger.warning("Store not configured — visitor and settings routes will answer 500")
    else:
        try:
            init_schema(engine)
            logger.info("Database schema verified")
        except SQLAlchemyError as exc:
            logger.error("Database connection FAILED — service will start but DB calls will fail: %s", exc)
    yield
    if engine is not None:
        engine.dispose()
        logger.info("Database connection pool disposed — shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Welcome Desk Service",
    description="Visitor intake, ministry routing and church branding settings.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Exception handlers ────────────────────────────────────────────────────
def _error_response(request: Request, status_code: int, content: dict) -> JSONResponse:
    content["request_id"] = getattr(request.state, "request_id", None)
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(WelcomeDeskError)
async def welcome_desk_error_handler(request: Request, exc: WelcomeDeskError):
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return _error_response(request, exc.status_code, exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # Drop the "body"/"header" location prefix FastAPI adds.
        loc = [str(part) for part in err["loc"][1:]] or [str(err["loc"][0])]
        errors.append({"field": ".".join(loc), "message": err["msg"]})
    return _error_response(request, 400, ValidationError(errors).to_dict())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "message": str(exc), "request_id": req_id},
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(visitor_controller.router)
app.include_router(settings_controller.router)
app.include_router(upload_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT)
