"""
Shared pytest fixtures.

Key patterns:

1. No network: the sheet export host and the script endpoint are both
   served by httpx.MockTransport handlers backed by a FakeSpreadsheet.
2. DI Override: app.dependency_overrides injects services built on the
   fake into the real routers.

Fixture Hierarchy:
    spreadsheet -> repo -> services -> test_app -> client
"""
import os
from typing import Any, Dict, List, Union

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Set test configuration before importing config modules
TEST_API_KEY = "test-api-key-for-testing-purposes-12345678"
TEST_SCRIPT_URL = "https://script.example.test/exec"
os.environ.setdefault("HERD_API_KEY", TEST_API_KEY)
os.environ.setdefault("HERD_SCRIPT_URL", TEST_SCRIPT_URL)

from herd_monitor.clients import ScriptClient, SheetsClient
from herd_monitor.core import dependencies as deps
from herd_monitor.core.auth import verify_api_key
from herd_monitor.core.exceptions import setup_exception_handlers
from herd_monitor.repositories import FarmRepository
from herd_monitor.services import AnalyticsService, HerdService, RegistryService, UserService

# Reply for an action whose endpoint cannot be reached
UNREACHABLE = object()


class FakeSpreadsheet:
    """
    In-memory stand-in for the published sheet and its script endpoint.

    ``tabs`` maps a tab name to CSV text, or to an HTTP status to fail
    with. Missing tabs answer 404. ``actions`` maps an action name to a
    JSON body, an HTTP status, raw text, or UNREACHABLE. Unlisted actions
    succeed. Every script call's query parameters land in ``calls``.
    """

    UNREACHABLE = UNREACHABLE

    def __init__(self):
        self.tabs: Dict[str, Union[str, int]] = {}
        self.actions: Dict[str, Any] = {}
        self.calls: List[Dict[str, str]] = []
        self.sheet_requests: List[str] = []

    def _handle_sheet(self, request: httpx.Request) -> httpx.Response:
        name = request.url.params.get("sheet")
        self.sheet_requests.append(name)
        body = self.tabs.get(name, 404)
        if isinstance(body, int):
            return httpx.Response(body)
        return httpx.Response(200, text=body)

    def _handle_script(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.calls.append(params)
        reply = self.actions.get(params["action"], {"success": True, "message": "ok"})
        if reply is UNREACHABLE:
            raise httpx.ConnectError("Connection refused", request=request)
        if isinstance(reply, int):
            return httpx.Response(reply)
        if isinstance(reply, str):
            return httpx.Response(200, text=reply)
        return httpx.Response(200, json=reply)

    def actions_called(self) -> List[str]:
        return [c["action"] for c in self.calls]

    def last_call(self, action: str) -> Dict[str, str]:
        return [c for c in self.calls if c["action"] == action][-1]

    def sheets_client(self) -> SheetsClient:
        return SheetsClient(
            sheet_id="test-sheet",
            base_url="https://sheets.example.test/d",
            transport=httpx.MockTransport(self._handle_sheet),
        )

    def script_client(self) -> ScriptClient:
        return ScriptClient(
            base_url=TEST_SCRIPT_URL,
            transport=httpx.MockTransport(self._handle_script),
        )


@pytest.fixture
def spreadsheet():
    return FakeSpreadsheet()


@pytest.fixture
def script_client(spreadsheet):
    return spreadsheet.script_client()


@pytest.fixture
def repo(spreadsheet, script_client):
    """FarmRepository reading from the fake sheet and script endpoint."""
    return FarmRepository(sheets_client=spreadsheet.sheets_client(), script_client=script_client)


@pytest.fixture
def herd_service(repo):
    return HerdService(farm_repository=repo)


@pytest.fixture
def registry_service(repo, script_client):
    return RegistryService(farm_repository=repo, script_client=script_client)


@pytest.fixture
def user_service(repo, registry_service, script_client):
    return UserService(
        farm_repository=repo,
        registry_service=registry_service,
        script_client=script_client,
    )


@pytest.fixture
def analytics_service(repo, herd_service):
    return AnalyticsService(farm_repository=repo, herd_service=herd_service)


@pytest.fixture
def test_app(repo, herd_service, registry_service, user_service, analytics_service):
    """
    FastAPI app with the real routers and services built on the fake.
    """
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

    app = FastAPI(title="Herd Monitor API Test")
    setup_exception_handlers(app)

    app.dependency_overrides[deps.get_farm_repository] = lambda: repo
    app.dependency_overrides[deps.get_herd_service] = lambda: herd_service
    app.dependency_overrides[deps.get_registry_service] = lambda: registry_service
    app.dependency_overrides[deps.get_user_service] = lambda: user_service
    app.dependency_overrides[deps.get_analytics_service] = lambda: analytics_service

    # Skip API key verification in tests
    async def skip_auth():
        return TEST_API_KEY
    app.dependency_overrides[verify_api_key] = skip_auth

    for router in (
        health_router,
        auth_router,
        owners_router,
        cattle_router,
        records_router,
        users_router,
        exports_router,
        dashboard_router,
    ):
        app.include_router(router)

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client for the API."""
    return TestClient(test_app)
