"""
Service layer for writes to the farm database.

Every write is one action on the script endpoint. Transport, HTTP status
and payload failures propagate as ScriptAPIError; ``success: false`` comes
back as a normal CommandResult. Writes are not visible to reads until
the sheet catches up, so callers re-fetch.
"""
import logging
from typing import Any, Dict, Iterable, Mapping

from pydantic import ValidationError

from herd_monitor.clients import ScriptClient
from herd_monitor.core.exceptions import ScriptPayloadError
from herd_monitor.repositories import FarmRepository
from herd_monitor.repositories.mappers import parse_int
from herd_monitor.schemas import (
    OWNER_ID_PREFIX,
    Cattle,
    CattleUpdate,
    CommandResult,
    HealthRecord,
    MilkRecord,
    Owner,
    OwnerCreate,
    TreatmentRecord,
)

logger = logging.getLogger(__name__)


def next_sequential_id(existing_ids: Iterable[str], prefix: str) -> str:
    """
    Next id after the highest numeric suffix among ``existing_ids``.

    The prefix is stripped, the leading digits parsed (anything else counts
    as 0), and the maximum plus one is re-prefixed, zero-padded to three
    digits. Two callers working from the same snapshot get the same id.

    Example:
        >>> next_sequential_id(["OWN001", "OWN003"], "OWN")
        'OWN004'
    """
    highest = 0
    for existing in existing_ids:
        number = parse_int(existing.replace(prefix, "", 1))
        if number is not None and number > highest:
            highest = number
    return f"{prefix}{highest + 1:03d}"


async def run_command(
    script_client: ScriptClient,
    action: str,
    params: Mapping[str, Any],
    **extra: Any,
) -> CommandResult:
    """
    Run ``action`` and wrap the envelope in a CommandResult.

    Keyword ``extra`` fields (e.g. a generated ``ownerId``) are merged over
    the response.
    """
    payload: Dict[str, Any] = await script_client.call(action, params)
    try:
        return CommandResult.model_validate({**payload, **extra})
    except ValidationError as e:
        raise ScriptPayloadError(action=action, detail=f"Unexpected response shape: {e}") from e


class RegistryService:
    """
    Writes for owners, cattle, milk, health and treatment records.
    """

    def __init__(self, farm_repository: FarmRepository, script_client: ScriptClient):
        self._repo = farm_repository
        self._script = script_client

    # =========================================================================
    # OWNERS
    # =========================================================================

    async def generate_owner_id(self) -> str:
        """Next ``OWN###`` id based on the owners currently readable."""
        owners = await self._repo.fetch_owners()
        return next_sequential_id((o.owner_id for o in owners), OWNER_ID_PREFIX)

    async def add_owner(self, owner: Owner) -> CommandResult:
        logger.info(f"Adding owner: {owner.owner_id}")
        return await run_command(self._script, "addOwner", {
            "ownerId": owner.owner_id,
            "ownerName": owner.owner_name,
            "phone": owner.phone,
            "address": owner.address,
            "email": owner.email,
        })

    async def add_owner_with_id(self, owner: OwnerCreate) -> CommandResult:
        """
        Add an owner under a freshly generated id.

        Returns:
            CommandResult with ``owner_id`` set to the generated id
        """
        owner_id = await self.generate_owner_id()
        logger.info(f"Adding owner with generated id: {owner_id}")
        return await run_command(self._script, "addOwner", {
            "ownerId": owner_id,
            "ownerName": owner.owner_name,
            "phone": owner.phone,
            "address": owner.address,
            "email": owner.email or "",
        }, ownerId=owner_id)

    # =========================================================================
    # CATTLE
    # =========================================================================

    async def add_cattle(self, cattle: Cattle) -> CommandResult:
        logger.info(f"Adding cattle: {cattle.rfid}")
        return await run_command(self._script, "addCattle", {
            "rfid": cattle.rfid,
            "cattleName": cattle.cattle_name,
            "breed": cattle.breed,
            "age": cattle.age,
            "weight": cattle.weight,
            "healthStatus": cattle.health_status,
            "ownerId": cattle.owner_id,
        })

    async def add_rfid_cattle(self, cattle: Cattle) -> CommandResult:
        """Add a tag to the master database as unassigned (empty owner)."""
        return await self.add_cattle(cattle.model_copy(update={"owner_id": ""}))

    async def update_cattle(self, rfid: str, updates: CattleUpdate) -> CommandResult:
        """Send only the fields set on ``updates``."""
        logger.info(f"Updating cattle: {rfid}")
        return await run_command(self._script, "updateCattle", {"rfid": rfid, **updates.to_wire()})

    async def delete_cattle(self, rfid: str) -> CommandResult:
        logger.info(f"Deleting cattle: {rfid}")
        return await run_command(self._script, "deleteCattle", {"rfid": rfid})

    # =========================================================================
    # EVENT RECORDS
    # =========================================================================
    # The script assigns id and timestamp on insert.

    async def add_milk_record(self, record: MilkRecord) -> CommandResult:
        return await run_command(self._script, "addMilkRecord", {
            "rfid": record.rfid,
            "cattleName": record.cattle_name,
            "quantity": record.quantity,
            "quality": record.quality,
            "temperature": record.temperature,
            "session": record.session,
            "recordedBy": record.recorded_by,
        })

    async def add_health_record(self, record: HealthRecord) -> CommandResult:
        return await run_command(self._script, "addHealthRecord", {
            "rfid": record.rfid,
            "cattleName": record.cattle_name,
            "temperature": record.temperature,
            "heartRate": record.heart_rate,
            "respiratoryRate": record.respiratory_rate,
            "bodyConditionScore": record.body_condition_score,
            "healthStatus": record.health_status,
            "riskLevel": record.risk_level,
            "symptoms": record.symptoms,
            "diagnosis": record.diagnosis,
            "treatment": record.treatment,
            "notes": record.notes,
            "recordedBy": record.recorded_by,
        })

    async def add_treatment(self, treatment: TreatmentRecord) -> CommandResult:
        return await run_command(self._script, "addTreatment", {
            "rfid": treatment.rfid,
            "cattleName": treatment.cattle_name,
            "medication": treatment.medication,
            "dosage": treatment.dosage,
            "duration": treatment.duration,
            "administeredBy": treatment.administered_by,
            "followUpDate": treatment.follow_up_date,
            "notes": treatment.notes,
        })
