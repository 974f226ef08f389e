"""
FastAPI Dependency Injection configuration for the herd monitor API.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends()
    Service Layer (HerdService, RegistryService, UserService, AnalyticsService)
         ↓ Injected
    FarmRepository
         ↓ Injected
    SheetsClient / ScriptClient

Testing:
    app.dependency_overrides[get_herd_service] = lambda: herd_service
"""
import logging
from typing import Optional

from herd_monitor.clients import ScriptClient, SheetsClient
from herd_monitor.clients import get_script_client as _get_script_client
from herd_monitor.clients import get_sheets_client as _get_sheets_client
from herd_monitor.core.config import settings
from herd_monitor.core.exceptions import ScriptNotConfiguredError
from herd_monitor.repositories import FarmRepository
from herd_monitor.services import AnalyticsService, HerdService, RegistryService, UserService

logger = logging.getLogger(__name__)


# =============================================================================
# CLIENT DEPENDENCIES
# =============================================================================

def get_sheets_client() -> SheetsClient:
    return _get_sheets_client()


def get_optional_script_client() -> Optional[ScriptClient]:
    """The script client, or None when HERD_SCRIPT_URL is not set."""
    if not settings.herd_script_url:
        return None
    return _get_script_client()


def get_script_client() -> ScriptClient:
    """
    The script client for write routes.

    Raises:
        ScriptNotConfiguredError: If HERD_SCRIPT_URL is not set.
    """
    client = get_optional_script_client()
    if client is None:
        raise ScriptNotConfiguredError()
    return client


# =============================================================================
# REPOSITORY DEPENDENCY
# =============================================================================

def get_farm_repository() -> FarmRepository:
    return FarmRepository(
        sheets_client=get_sheets_client(),
        script_client=get_optional_script_client(),
    )


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

def get_herd_service() -> HerdService:
    return HerdService(farm_repository=get_farm_repository())


def get_registry_service() -> RegistryService:
    return RegistryService(
        farm_repository=get_farm_repository(),
        script_client=get_script_client(),
    )


def get_user_service() -> UserService:
    return UserService(
        farm_repository=get_farm_repository(),
        registry_service=get_registry_service(),
        script_client=get_script_client(),
    )


def get_analytics_service() -> AnalyticsService:
    repo = get_farm_repository()
    return AnalyticsService(farm_repository=repo, herd_service=HerdService(farm_repository=repo))
