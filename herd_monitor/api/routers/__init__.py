"""
API routers module.

This module contains all API route definitions organized by domain.
"""
from herd_monitor.api.routers.health import router as health_router
from herd_monitor.api.routers.auth import router as auth_router
from herd_monitor.api.routers.owners import router as owners_router
from herd_monitor.api.routers.cattle import router as cattle_router
from herd_monitor.api.routers.records import router as records_router
from herd_monitor.api.routers.users import router as users_router
from herd_monitor.api.routers.exports import router as exports_router
from herd_monitor.api.routers.dashboard import router as dashboard_router

__all__ = [
    "health_router",
    "auth_router",
    "owners_router",
    "cattle_router",
    "records_router",
    "users_router",
    "exports_router",
    "dashboard_router",
]
