"""
Tests for the sheet export and script endpoint HTTP clients.

Both clients are driven through httpx.MockTransport; nothing leaves the
process.
"""
import httpx
import pytest

from herd_monitor.clients import ScriptClient, SheetsClient
from herd_monitor.clients.script_client import build_query_params, encode_param_value
from herd_monitor.core.config import settings
from herd_monitor.core.exceptions import (
    ScriptAPIError,
    ScriptConnectionError,
    ScriptPayloadError,
    SheetFetchError,
)

SCRIPT_URL = "https://script.example.test/exec"


def sheets_client(handler) -> SheetsClient:
    return SheetsClient(
        sheet_id="abc",
        base_url="https://sheets.example.test/d/",
        transport=httpx.MockTransport(handler),
    )


def script_client(handler) -> ScriptClient:
    return ScriptClient(base_url=SCRIPT_URL, transport=httpx.MockTransport(handler))


# =============================================================================
# SHEETS CLIENT
# =============================================================================

class TestSheetsClient:

    def test_sheet_csv_url(self):
        client = sheets_client(lambda request: httpx.Response(200))
        assert client.sheet_csv_url("RFID_Database") == (
            "https://sheets.example.test/d/abc/gviz/tq?tqx=out:csv&sheet=RFID_Database"
        )

    def test_sheet_name_is_percent_encoded(self):
        client = sheets_client(lambda request: httpx.Response(200))
        assert client.sheet_csv_url("Milk Records").endswith("sheet=Milk%20Records")

    @pytest.mark.asyncio
    async def test_fetch_csv_returns_body_without_caching(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="ownerId,ownerName\nOWN001,Rajesh\n")

        text = await sheets_client(handler).fetch_csv("Owners")

        assert text == "ownerId,ownerName\nOWN001,Rajesh\n"
        assert seen[0].headers["Cache-Control"] == "no-cache"
        assert seen[0].url.params["sheet"] == "Owners"

    @pytest.mark.asyncio
    async def test_fetch_csv_error_status(self):
        client = sheets_client(lambda request: httpx.Response(500))

        with pytest.raises(SheetFetchError) as exc_info:
            await client.fetch_csv("Owners")

        assert exc_info.value.context["sheet_name"] == "Owners"
        assert exc_info.value.context["http_status"] == 500

    @pytest.mark.asyncio
    async def test_fetch_csv_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(SheetFetchError):
            await sheets_client(handler).fetch_csv("Owners")


# =============================================================================
# PARAMETER ENCODING
# =============================================================================

class TestParameterEncoding:

    def test_encode_values(self):
        assert encode_param_value(True) == "true"
        assert encode_param_value(False) == "false"
        assert encode_param_value(22.0) == "22"
        assert encode_param_value(37.2) == "37.2"
        assert encode_param_value(4) == "4"
        assert encode_param_value("") == ""

    def test_action_first_and_none_omitted(self):
        query = build_query_params("addCattle", {
            "rfid": "E1",
            "age": 4,
            "weight": 22.0,
            "notes": None,
            "ownerId": "",
        })
        assert query == {"action": "addCattle", "rfid": "E1", "age": "4", "weight": "22", "ownerId": ""}
        assert list(query)[0] == "action"

    def test_no_params(self):
        assert build_query_params("getUsers") == {"action": "getUsers"}


# =============================================================================
# SCRIPT CLIENT
# =============================================================================

class TestScriptClient:

    def test_requires_url(self, monkeypatch):
        monkeypatch.setattr(settings, "herd_script_url", "")
        with pytest.raises(ValueError, match="HERD_SCRIPT_URL"):
            ScriptClient()

    @pytest.mark.asyncio
    async def test_call_sends_action_and_returns_envelope(self):
        seen = []

        def handler(request):
            seen.append(dict(request.url.params))
            return httpx.Response(200, json={"success": True, "message": "Cattle added"})

        result = await script_client(handler).call("addCattle", {"rfid": "E1", "age": 4})

        assert result == {"success": True, "message": "Cattle added"}
        assert seen == [{"action": "addCattle", "rfid": "E1", "age": "4"}]

    @pytest.mark.asyncio
    async def test_success_false_is_returned(self):
        client = script_client(lambda request: httpx.Response(
            200, json={"success": False, "message": "RFID already exists"}
        ))

        result = await client.call("addCattle", {"rfid": "E1"})

        assert result["success"] is False
        assert result["message"] == "RFID already exists"

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self):
        client = script_client(lambda request: httpx.Response(500))

        with pytest.raises(ScriptAPIError) as exc_info:
            await client.call("addCattle")

        assert not isinstance(exc_info.value, ScriptConnectionError)
        assert exc_info.value.detail == "API call failed: 500 Internal Server Error"
        assert exc_info.value.context["action"] == "addCattle"

    @pytest.mark.asyncio
    async def test_unreachable_raises_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(ScriptConnectionError):
            await script_client(handler).call("getUsers")

    @pytest.mark.asyncio
    async def test_non_json_body_raises_payload_error(self):
        client = script_client(lambda request: httpx.Response(200, text="<html>Sign in</html>"))

        with pytest.raises(ScriptPayloadError):
            await client.call("getUsers")

    @pytest.mark.asyncio
    async def test_json_array_body_raises_payload_error(self):
        client = script_client(lambda request: httpx.Response(200, json=[1, 2, 3]))

        with pytest.raises(ScriptPayloadError):
            await client.call("getUsers")
