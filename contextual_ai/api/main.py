"""
FastAPI application for contextual-ai.

Provides REST API for:
- Offline-first, low-bandwidth and behavioral content adaptation
- Accessibility (screen reader, captions, mobile) and engagement models
- Contextual and personal snapshot management
- Adaptive chat responses and recommendations
- Learning sessions
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from contextual_ai.api.responses import ERROR_MESSAGES, describe_validation_errors, error_body
from contextual_ai.db.database import check_database_health, close_db, connect_db
from contextual_ai.logging_setup import configure_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    configure_logging(settings.log_level, settings.log_file)
    logger.info(f"Starting {settings.app_name} service...")
    connect_db()
    logger.info(f"Service started on {settings.api_host}:{settings.api_port}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name} service...")
    close_db()


app = FastAPI(
    title=settings.app_name,
    description=f"""
    {settings.app_description}

    ## Features

    - **Offline-First**: Prepare content for offline use and decide when to resync
    - **Low-Bandwidth**: Compress content by bandwidth tier
    - **Behavioral Adaptation**: Reshape content from pacing, attention and engagement
    - **Context & Personal Engines**: Environmental and learner snapshots with rule-based analysis
    - **Accessibility & Engagement**: Screen reader text, captions, mobile layout, gamification, motivation, localization

    ## Data Flow

    ```
    Request (context / personal / behavior fragments)
        ↓ shallow merge
    Contextual + Personal snapshots
        ↓ analysis
    Format choice + adaptation flags
        ↓
    Adapted content
    ```
    """,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status code and duration."""
    started = time.perf_counter()
    logger.debug(f"Incoming {request.method} request to {request.url.path}")

    response = await call_next(request)

    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
    )
    return response


# ========================================
# Error Handlers
# ========================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = describe_validation_errors(list(exc.errors()))
    logger.warning(f"Rejected {request.method} {request.url.path}: {body['error']}")
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = {"success": False, **exc.detail}
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=error_body(ERROR_MESSAGES["INTERNAL_ERROR"]))


# ========================================
# Health & Status Endpoints
# ========================================


@app.get("/", tags=["Health"])
def root() -> dict[str, Any]:
    """Root endpoint returning service info."""
    prefix = settings.api_prefix
    return {
        "message": settings.app_name,
        "version": settings.api_version,
        "endpoints": {
            "learning": f"{prefix}/learning",
            "learningModels": f"{prefix}/learning-models",
            "context": f"{prefix}/context",
            "personal": f"{prefix}/personal",
            "sessions": f"{prefix}/sessions",
            "health": f"{prefix}/health",
            "docs": "/docs",
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get(f"{settings.api_prefix}/health", tags=["Health"])
def health_check() -> dict[str, Any]:
    """Health check with an actual database connectivity test."""
    db_status, db_error = check_database_health()

    result: dict[str, Any] = {
        "status": "OK" if db_status == "ok" else "DEGRADED",
        "service": settings.app_name,
        "version": settings.api_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {"database": db_status},
        "adaptation": settings.get_adaptation_config(),
    }
    if db_error:
        result["errors"] = {"database": db_error}

    return result


# ========================================
# Import and mount routers
# ========================================

from contextual_ai.api.routers import (  # noqa: E402
    context_router,
    learning_models_router,
    learning_router,
    sessions_router,
)

app.include_router(learning_router.router, prefix=f"{settings.api_prefix}/learning", tags=["Learning"])
app.include_router(
    learning_models_router.router,
    prefix=f"{settings.api_prefix}/learning-models",
    tags=["Learning Models"],
)
app.include_router(context_router.router, prefix=settings.api_prefix, tags=["Context"])
app.include_router(sessions_router.router, prefix=f"{settings.api_prefix}/sessions", tags=["Sessions"])
