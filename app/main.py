from __future__ import annotations
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.achievements import router as achievements_router
from app.api.v1.health import router as health_router
from app.config import settings
from app.db.base import engine
from app.core.achievements.errors import AchievementsError

logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger(__name__)

description = """
Read-only view of a wallet's achievement progress, grouped by category.
"""
tags_metadata = [
    {"name": "Achievements", "description": "Achievement progress per wallet."},
    {"name": "Health", "description": "Liveness and database checks."},
]

app = FastAPI(
    title="Achievement Progress API",
    description=description,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
)

app.include_router(achievements_router)
app.include_router(health_router)


@app.exception_handler(AchievementsError)
async def achievements_error_handler(request: Request, exc: AchievementsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


log.info("\U0001F331 FastAPI application configured. Environment: %s", settings.ENVIRONMENT)


@app.on_event("startup")
async def startup_event() -> None:
    log.info("\U0001F680 FastAPI application startup complete.")


@app.on_event("shutdown")
async def shutdown_event() -> None:
    await engine.dispose()
    log.info("\U0001F44B FastAPI application shutdown.")


@app.get("/healthz", tags=["Health"], status_code=status.HTTP_200_OK)
async def health_check():
    """Basic health check endpoint."""
    return {"status": "ok", "environment": settings.ENVIRONMENT}
