"""
FastAPI application entry point for the Herd Monitor API.

This module configures and creates the FastAPI application with:
- Structured JSON Logging with request id propagation
- Dependency Injection: services and the repository injected via Depends()
- Exception Handling: consistent error responses via setup_exception_handlers()
- CORS Middleware for the browser dashboard

Architecture Overview:
    Routers (api/routers/)
        health, auth, owners, cattle, records, users, exports, dashboard
    Services (services/)          <- injected via Depends()
        HerdService, RegistryService, UserService, AnalyticsService
    FarmRepository                <- injected into services
    SheetsClient / ScriptClient   <- CSV export reads, script endpoint actions
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from herd_monitor import __version__
from herd_monitor.core.config import API_HOST, API_PORT, API_RELOAD, settings
from herd_monitor.core.exceptions import setup_exception_handlers
from herd_monitor.core.logging_config import setup_logging
from herd_monitor.core.middleware import LoggingMiddleware
from herd_monitor.api.routers import (
    auth_router,
    cattle_router,
    dashboard_router,
    exports_router,
    health_router,
    owners_router,
    records_router,
    users_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup configures logging and reports which backends are wired.
    Clients are created per request, so shutdown has nothing to release.
    """
    # =========================================================================
    # STARTUP
    # =========================================================================
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Starting Herd Monitor API...")
    logger.info(
        "Backends configured",
        extra={
            "sheet_id": settings.herd_sheet_id,
            "script_endpoint": bool(settings.herd_script_url),
        }
    )

    yield

    # =========================================================================
    # SHUTDOWN
    # =========================================================================
    logger.info("Herd Monitor API shutting down...")


app = FastAPI(
    title="Herd Monitor API",
    description="REST API over a spreadsheet-backed farm: owners, cattle, RFID gate logs, milk, health and treatment records.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================
setup_exception_handlers(app)

# =============================================================================
# MIDDLEWARE
# =============================================================================
# Executed in reverse order of registration.

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

# =============================================================================
# ROUTERS
# =============================================================================
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(owners_router)
app.include_router(cattle_router)
app.include_router(records_router)
app.include_router(users_router)
app.include_router(exports_router)
app.include_router(dashboard_router)


if __name__ == "__main__":
    uvicorn.run(
        "herd_monitor.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD
    )
