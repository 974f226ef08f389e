"""
Tests for writes through the script endpoint and id generation.
"""
from unittest.mock import AsyncMock, patch

import pytest

from herd_monitor.core.exceptions import ScriptAPIError, ScriptConnectionError, ScriptPayloadError
from herd_monitor.repositories import OWNERS_SHEET
from herd_monitor.schemas import (
    Cattle,
    CattleUpdate,
    HealthRecord,
    MilkRecord,
    Owner,
    OwnerCreate,
    TreatmentRecord,
)
from herd_monitor.services import next_sequential_id

BELLA = Cattle(
    rfid="E1",
    cattle_name="Bella",
    breed="Jersey",
    age=4,
    weight=380,
    health_status="Healthy",
    owner_id="OWN001",
)


# =============================================================================
# ID GENERATION
# =============================================================================

@pytest.mark.parametrize("existing, expected", [
    ([], "OWN001"),
    (["OWN001", "OWN003"], "OWN004"),
    (["OWN003", "OWN001"], "OWN004"),
    (["OWN009", "OWNabc"], "OWN010"),
    (["OWN999"], "OWN1000"),
    (["", "OWN"], "OWN001"),
])
def test_next_sequential_id(existing, expected):
    assert next_sequential_id(existing, "OWN") == expected


def test_next_user_id():
    assert next_sequential_id(["USER001", "USER002"], "USER") == "USER003"


# =============================================================================
# OWNERS
# =============================================================================

class TestOwners:

    @pytest.mark.asyncio
    async def test_generate_owner_id_from_mock_owners(self, registry_service):
        assert await registry_service.generate_owner_id() == "OWN003"

    @pytest.mark.asyncio
    async def test_generate_owner_id_from_current_owners(self, repo, registry_service):
        owners = [Owner(owner_id="OWN001"), Owner(owner_id="OWN003")]

        with patch.object(repo, "fetch_owners", new_callable=AsyncMock) as mock_fetch:
            mock_fetch.return_value = owners

            owner_id = await registry_service.generate_owner_id()

            assert owner_id == "OWN004"
            mock_fetch.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_add_owner(self, spreadsheet, registry_service):
        result = await registry_service.add_owner(Owner(
            owner_id="OWN010", owner_name="Asha Devi", phone="+91-1", address="Village B", email="",
        ))

        assert result.success is True
        assert spreadsheet.last_call("addOwner") == {
            "action": "addOwner",
            "ownerId": "OWN010",
            "ownerName": "Asha Devi",
            "phone": "+91-1",
            "address": "Village B",
            "email": "",
        }

    @pytest.mark.asyncio
    async def test_add_owner_with_generated_id(self, spreadsheet, registry_service):
        spreadsheet.tabs[OWNERS_SHEET] = (
            "ownerId,ownerName,phone,address,email\n"
            "OWN001,Rajesh Kumar,,,\n"
            "OWN005,Priya Sharma,,,\n"
        )

        result = await registry_service.add_owner_with_id(OwnerCreate(owner_name="Asha Devi"))

        assert result.success is True
        assert result.owner_id == "OWN006"
        call = spreadsheet.last_call("addOwner")
        assert call["ownerId"] == "OWN006"
        assert call["email"] == ""

    @pytest.mark.asyncio
    async def test_rejected_owner_still_reports_generated_id(self, spreadsheet, registry_service):
        spreadsheet.actions["addOwner"] = {"success": False, "message": "Duplicate owner"}

        result = await registry_service.add_owner_with_id(OwnerCreate(owner_name="Asha Devi"))

        assert result.success is False
        assert result.message == "Duplicate owner"
        assert result.owner_id == "OWN003"


# =============================================================================
# CATTLE
# =============================================================================

class TestCattle:

    @pytest.mark.asyncio
    async def test_add_cattle(self, spreadsheet, registry_service):
        result = await registry_service.add_cattle(BELLA)

        assert result.success is True
        assert spreadsheet.last_call("addCattle") == {
            "action": "addCattle",
            "rfid": "E1",
            "cattleName": "Bella",
            "breed": "Jersey",
            "age": "4",
            "weight": "380",
            "healthStatus": "Healthy",
            "ownerId": "OWN001",
        }

    @pytest.mark.asyncio
    async def test_add_rfid_cattle_is_unassigned(self, spreadsheet, registry_service):
        await registry_service.add_rfid_cattle(BELLA)
        assert spreadsheet.last_call("addCattle")["ownerId"] == ""

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self, spreadsheet, registry_service):
        await registry_service.update_cattle("E1", CattleUpdate(health_status="Sick", weight=372))

        assert spreadsheet.last_call("updateCattle") == {
            "action": "updateCattle",
            "rfid": "E1",
            "healthStatus": "Sick",
            "weight": "372",
        }

    @pytest.mark.asyncio
    async def test_delete_cattle(self, spreadsheet, registry_service):
        await registry_service.delete_cattle("E1")
        assert spreadsheet.last_call("deleteCattle") == {"action": "deleteCattle", "rfid": "E1"}

    @pytest.mark.asyncio
    async def test_rejection_is_a_result(self, spreadsheet, registry_service):
        spreadsheet.actions["addCattle"] = {"success": False, "message": "RFID already exists"}

        result = await registry_service.add_cattle(BELLA)

        assert result.success is False
        assert result.message == "RFID already exists"

    @pytest.mark.asyncio
    async def test_extra_response_fields_are_kept(self, spreadsheet, registry_service):
        spreadsheet.actions["addCattle"] = {"success": True, "rowNumber": 12}

        result = await registry_service.add_cattle(BELLA)

        assert result.model_extra["rowNumber"] == 12

    @pytest.mark.asyncio
    async def test_numeric_echoes_become_text(self, spreadsheet, registry_service):
        spreadsheet.actions["addCattle"] = {"success": True, "message": 42, "ownerId": 7, "userId": 3}

        result = await registry_service.add_cattle(BELLA)

        assert result.success is True
        assert result.message == "42"
        assert result.owner_id == "7"
        assert result.user_id == "3"


# =============================================================================
# EVENT RECORDS
# =============================================================================

class TestEventRecords:

    @pytest.mark.asyncio
    async def test_add_milk_record(self, spreadsheet, registry_service):
        await registry_service.add_milk_record(MilkRecord(
            rfid="E1", cattle_name="Bella", quantity=22.0, quality="Good",
            temperature=37.2, session="Evening", recorded_by="Ravi",
        ))

        assert spreadsheet.last_call("addMilkRecord") == {
            "action": "addMilkRecord",
            "rfid": "E1",
            "cattleName": "Bella",
            "quantity": "22",
            "quality": "Good",
            "temperature": "37.2",
            "session": "Evening",
            "recordedBy": "Ravi",
        }

    @pytest.mark.asyncio
    async def test_add_health_record_omits_unset_fields(self, spreadsheet, registry_service):
        await registry_service.add_health_record(HealthRecord(
            rfid="E1", cattle_name="Bella", temperature=39.4, heart_rate=88,
            health_status="Sick", risk_level="High", symptoms="Fever", recorded_by="Dr. Rao",
        ))

        call = spreadsheet.last_call("addHealthRecord")
        assert call["heartRate"] == "88"
        assert call["symptoms"] == "Fever"
        assert "respiratoryRate" not in call
        assert "bodyConditionScore" not in call
        assert "notes" not in call

    @pytest.mark.asyncio
    async def test_add_treatment(self, spreadsheet, registry_service):
        await registry_service.add_treatment(TreatmentRecord(
            rfid="E1", cattle_name="Bella", medication="Oxytetracycline", dosage="10ml",
            duration="5 days", administered_by="Dr. Rao", follow_up_date="2025-01-05",
        ))

        call = spreadsheet.last_call("addTreatment")
        assert call["administeredBy"] == "Dr. Rao"
        assert call["followUpDate"] == "2025-01-05"
        assert "notes" not in call


# =============================================================================
# FAILURES
# =============================================================================

class TestWriteFailures:

    @pytest.mark.asyncio
    async def test_error_status_propagates(self, spreadsheet, registry_service):
        spreadsheet.actions["addCattle"] = 500
        with pytest.raises(ScriptAPIError, match="API call failed: 500"):
            await registry_service.add_cattle(BELLA)

    @pytest.mark.asyncio
    async def test_unreachable_propagates(self, spreadsheet, registry_service):
        spreadsheet.actions["deleteCattle"] = spreadsheet.UNREACHABLE
        with pytest.raises(ScriptConnectionError):
            await registry_service.delete_cattle("E1")

    @pytest.mark.asyncio
    async def test_bad_envelope_propagates(self, spreadsheet, registry_service):
        spreadsheet.actions["addCattle"] = {"success": "maybe"}
        with pytest.raises(ScriptPayloadError):
            await registry_service.add_cattle(BELLA)
