"""
Repository for every sheet-backed collection.

Each fetch goes sheet -> CSV text -> rows -> typed records. Fetch methods
never raise: a failed or empty read falls back to the static mock
collection, except for cattle and users, which fall back to an empty
list.

Architecture:
    Services -> FarmRepository -> SheetsClient / ScriptClient -> spreadsheet
"""
import logging
from typing import Callable, List, Optional, Sequence, TypeVar

from herd_monitor.clients import ScriptClient, SheetsClient
from herd_monitor.repositories.csv_decoder import decode_csv, map_data_rows
from herd_monitor.repositories.mappers import (
    cattle_from_api,
    cattle_from_row,
    health_record_from_row,
    milk_record_from_row,
    owner_from_row,
    rfid_log_from_row,
    treatment_from_row,
    user_from_api,
)
from herd_monitor.repositories.mock_data import (
    MOCK_HEALTH_RECORDS,
    MOCK_LOGS,
    MOCK_MILK_RECORDS,
    MOCK_OWNERS,
    MOCK_TREATMENTS,
)
from herd_monitor.schemas import (
    Cattle,
    HealthRecord,
    MilkRecord,
    Owner,
    RFIDLog,
    TreatmentRecord,
    User,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sheet tab names
OWNERS_SHEET = "Owners"
CATTLE_SHEET = "RFID_Database"
LOGS_SHEET = "Logs"
MILK_SHEET = "MilkRecords"
HEALTH_SHEET = "HealthRecords"
TREATMENTS_SHEET = "Treatments"


class FarmRepository:
    """
    Read access to owners, cattle, logs, milk, health, treatment and user data.
    """

    def __init__(self, sheets_client: SheetsClient, script_client: Optional[ScriptClient] = None):
        """
        Args:
            sheets_client: Client for the CSV export read path.
            script_client: Client for the script endpoint. Without one the
                live cattle read is skipped and users read as empty.
        """
        self._sheets = sheets_client
        self._script = script_client

    async def _fetch_records(
        self,
        sheet_name: str,
        mapper: Callable[[Sequence[str]], T],
    ) -> List[T]:
        """Fetch a tab and map its data rows. Raises on fetch failure."""
        csv_text = await self._sheets.fetch_csv(sheet_name)
        return map_data_rows(decode_csv(csv_text), mapper)

    async def _fetch_with_mock_fallback(
        self,
        sheet_name: str,
        mapper: Callable[[Sequence[str]], T],
        mock: Sequence[T],
    ) -> List[T]:
        try:
            records = await self._fetch_records(sheet_name, mapper)
        except Exception as e:
            logger.error(
                f"Error fetching {sheet_name}, using mock data: {e}",
                extra={"sheet": sheet_name}
            )
            return list(mock)

        if not records:
            logger.warning(
                f"Sheet {sheet_name} has no rows, using mock data",
                extra={"sheet": sheet_name}
            )
            return list(mock)

        logger.info(f"Fetched {len(records)} rows from {sheet_name}", extra={"sheet": sheet_name})
        return records

    # =========================================================================
    # OWNERS
    # =========================================================================

    async def fetch_owners(self) -> List[Owner]:
        return await self._fetch_with_mock_fallback(OWNERS_SHEET, owner_from_row, MOCK_OWNERS)

    # =========================================================================
    # CATTLE
    # =========================================================================

    async def _fetch_cattle_from_api(self) -> Optional[List[Cattle]]:
        """
        Live cattle list from the script endpoint.

        Returns None when the endpoint is not configured, fails, or does not
        answer with ``success`` and a ``cattle`` list, so the caller can fall
        back to the CSV export.
        """
        if self._script is None:
            return None

        try:
            result = await self._script.call("getCattle")
        except Exception as e:
            logger.warning(f"getCattle failed, falling back to sheet: {e}")
            return None

        cattle = result.get("cattle")
        if not result.get("success") or not isinstance(cattle, list):
            logger.warning("getCattle returned no cattle, falling back to sheet")
            return None

        return [cattle_from_api(item) for item in cattle if isinstance(item, dict)]

    async def fetch_cattle_database(self) -> List[Cattle]:
        """
        All cattle, unassigned ones included.

        Tries the script endpoint first, then the ``RFID_Database`` tab.
        When both fail the result is an empty list, never mock animals.
        """
        cattle = await self._fetch_cattle_from_api()
        if cattle is not None:
            logger.info(f"Fetched {len(cattle)} cattle from script endpoint")
            return cattle

        try:
            cattle = await self._fetch_records(CATTLE_SHEET, cattle_from_row)
        except Exception as e:
            logger.error(f"Error fetching cattle from sheet: {e}", extra={"sheet": CATTLE_SHEET})
            return []

        logger.info(f"Fetched {len(cattle)} cattle from sheet", extra={"sheet": CATTLE_SHEET})
        return cattle

    # =========================================================================
    # EVENT RECORDS
    # =========================================================================

    async def fetch_rfid_logs(self) -> List[RFIDLog]:
        """Gate logs, newest first as the sheet stores them."""
        return await self._fetch_with_mock_fallback(LOGS_SHEET, rfid_log_from_row, MOCK_LOGS)

    async def fetch_milk_records(self) -> List[MilkRecord]:
        return await self._fetch_with_mock_fallback(MILK_SHEET, milk_record_from_row, MOCK_MILK_RECORDS)

    async def fetch_health_records(self) -> List[HealthRecord]:
        return await self._fetch_with_mock_fallback(HEALTH_SHEET, health_record_from_row, MOCK_HEALTH_RECORDS)

    async def fetch_treatments(self) -> List[TreatmentRecord]:
        return await self._fetch_with_mock_fallback(TREATMENTS_SHEET, treatment_from_row, MOCK_TREATMENTS)

    # =========================================================================
    # USERS
    # =========================================================================

    async def fetch_users(self) -> List[User]:
        """
        All users via the ``getUsers`` action.

        Returns an empty list on any failure or on ``success: false``.
        """
        if self._script is None:
            logger.warning("No script endpoint configured, user list unavailable")
            return []

        try:
            result = await self._script.call("getUsers")
        except Exception as e:
            logger.error(f"Error fetching users: {e}")
            return []

        users = result.get("users")
        if not result.get("success") or not isinstance(users, list):
            return []

        return [user_from_api(item) for item in users if isinstance(item, dict)]
