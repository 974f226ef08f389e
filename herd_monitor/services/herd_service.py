"""
Service layer for derived views over the fetched collections.

Joins between collections are best-effort filters on plain string keys:
a dangling ``owner_id`` or ``rfid`` simply matches nothing. Ordering is
whatever the sheet returns; nothing here sorts.

Architecture:
    API Layer (routers) -> HerdService -> FarmRepository -> spreadsheet
"""
import logging
from typing import Iterable, List, Sequence, TypeVar

from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import (
    ALERT_HEALTH_STATUSES,
    ALERT_RISK_LEVELS,
    Cattle,
    HealthRecord,
    MilkRecord,
    RFIDLog,
    Session,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")


# =============================================================================
# PURE FILTERS
# =============================================================================

def filter_cattle_by_owner(cattle: Iterable[Cattle], owner_id: str) -> List[Cattle]:
    """Cattle whose ``owner_id`` equals ``owner_id`` exactly, in source order."""
    return [c for c in cattle if c.owner_id == owner_id]


def filter_by_rfids(records: Iterable[R], rfids: Iterable[str]) -> List[R]:
    """Records whose ``rfid`` is in ``rfids``, in source order."""
    wanted = set(rfids)
    return [r for r in records if r.rfid in wanted]


def is_health_alert(record: HealthRecord) -> bool:
    """High/Critical risk OR Sick/Critical status."""
    return (
        record.risk_level in ALERT_RISK_LEVELS
        or record.health_status in ALERT_HEALTH_STATUSES
    )


def select_health_alerts(records: Iterable[HealthRecord]) -> List[HealthRecord]:
    return [r for r in records if is_health_alert(r)]


# =============================================================================
# SERVICE
# =============================================================================

class HerdService:
    """
    Owner-scoped and alerting views of the herd.

    Every method re-fetches; two calls may see different snapshots.
    """

    def __init__(self, farm_repository: FarmRepository):
        self._repo = farm_repository

    async def get_cattle_by_owner(self, owner_id: str) -> List[Cattle]:
        """
        Cattle belonging to ``owner_id``.

        Args:
            owner_id: Owner key, e.g. 'OWN001'

        Returns:
            Matching cattle in source order (empty for an unknown owner)
        """
        all_cattle = await self._repo.fetch_cattle_database()
        return filter_cattle_by_owner(all_cattle, owner_id)

    async def _owner_rfids(self, owner_id: str) -> List[str]:
        return [c.rfid for c in await self.get_cattle_by_owner(owner_id)]

    async def get_logs_by_owner(self, owner_id: str) -> List[RFIDLog]:
        """
        Gate logs for the owner's current cattle.

        Logs of animals no longer assigned to the owner are excluded.
        """
        rfids = await self._owner_rfids(owner_id)
        all_logs = await self._repo.fetch_rfid_logs()
        return filter_by_rfids(all_logs, rfids)

    async def get_milk_records_by_owner(self, owner_id: str) -> List[MilkRecord]:
        """Milk records for the owner's current cattle."""
        rfids = await self._owner_rfids(owner_id)
        all_records = await self._repo.fetch_milk_records()
        return filter_by_rfids(all_records, rfids)

    async def get_health_alerts(self) -> List[HealthRecord]:
        """Health records that need attention (see :func:`is_health_alert`)."""
        alerts = select_health_alerts(await self._repo.fetch_health_records())
        if alerts:
            logger.info(f"{len(alerts)} health alert(s) active")
        return alerts

    # -------------------------------------------------------------------------
    # Session-scoped views
    # -------------------------------------------------------------------------

    async def get_cattle_for_session(self, session: Session) -> List[Cattle]:
        """A farmer's own cattle, or the whole herd for vets and admins."""
        owner_id = session.scoped_owner_id
        if owner_id:
            return await self.get_cattle_by_owner(owner_id)
        return await self._repo.fetch_cattle_database()

    async def get_logs_for_session(self, session: Session) -> List[RFIDLog]:
        owner_id = session.scoped_owner_id
        if owner_id:
            return await self.get_logs_by_owner(owner_id)
        return await self._repo.fetch_rfid_logs()

    async def get_milk_records_for_session(self, session: Session) -> List[MilkRecord]:
        owner_id = session.scoped_owner_id
        if owner_id:
            return await self.get_milk_records_by_owner(owner_id)
        return await self._repo.fetch_milk_records()


def recent(records: Sequence[R], limit: int) -> List[R]:
    """First ``limit`` records; the sheet already lists newest first."""
    return list(records[:limit])
