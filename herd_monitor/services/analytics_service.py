"""
Dashboard aggregates over herd, milk and health collections.

The module-level functions are pure and work on already-fetched lists.
AnalyticsService fetches what it needs and bundles the figures each
dashboard shows.
"""
import asyncio
import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from herd_monitor.core.datetime_utils import utc_today
from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import (
    HEALTH_STATUSES,
    MILK_QUALITIES,
    MILK_SESSIONS,
    NEEDS_CARE_STATUSES,
    Cattle,
    HealthRecord,
    MilkRecord,
    Session,
)
from herd_monitor.services.herd_service import HerdService, select_health_alerts

logger = logging.getLogger(__name__)

QUALITY_SCORES: Dict[str, int] = {"Excellent": 4, "Good": 3, "Fair": 2, "Poor": 1}


# =============================================================================
# RESULT CONTAINERS
# =============================================================================

@dataclass
class HerdStats:
    total: int
    healthy: int
    needs_care: int


@dataclass
class MilkSummary:
    total_quantity: float
    average_quantity: float
    good_or_better_pct: float
    record_count: int
    today_total: float
    average_quality: str


@dataclass
class DailyTotal:
    day: date
    quantity: float


@dataclass
class MilkOverview:
    summary: MilkSummary
    daily_totals: List[DailyTotal]
    quality_distribution: Dict[str, int]
    session_totals: Dict[str, float]
    top_producers: List[Tuple[str, float]]


@dataclass
class HealthOverview:
    status_distribution: Dict[str, int]
    alert_count: int
    total_records: int


@dataclass
class AdminOverview:
    total_cattle: int
    total_owners: int
    total_users: int
    total_milk_records: int
    total_health_records: int
    total_treatments: int
    unassigned_cattle: int = 0
    breeds: Dict[str, int] = field(default_factory=dict)


# =============================================================================
# PURE AGGREGATES
# =============================================================================

def herd_stats(cattle: Sequence[Cattle]) -> HerdStats:
    return HerdStats(
        total=len(cattle),
        healthy=sum(1 for c in cattle if c.health_status == "Healthy"),
        needs_care=sum(1 for c in cattle if c.health_status in NEEDS_CARE_STATUSES),
    )


def average_quality(records: Sequence[MilkRecord]) -> str:
    """
    Quality label for the mean score (Excellent=4 ... Poor=1).

    Unknown quality values score 0. Returns ``N/A`` for no records.
    """
    if not records:
        return "N/A"
    score = sum(QUALITY_SCORES.get(r.quality, 0) for r in records) / len(records)
    if score >= 3.5:
        return "Excellent"
    if score >= 2.5:
        return "Good"
    if score >= 1.5:
        return "Fair"
    return "Poor"


def recorded_on(timestamp: str, day: date) -> bool:
    """Whether ``timestamp`` falls on ``day``, read from its own ``YYYY-MM-DD`` prefix.

    The offset is not applied, so a record keeps the day it was written on.
    """
    return timestamp.startswith(day.isoformat())


def milk_total_on(records: Iterable[MilkRecord], day: date) -> float:
    return sum(r.quantity for r in records if recorded_on(r.timestamp, day))


def milk_summary(records: Sequence[MilkRecord], today: Optional[date] = None) -> MilkSummary:
    count = len(records)
    total = sum(r.quantity for r in records)
    good_or_better = sum(1 for r in records if r.quality in ("Excellent", "Good"))
    return MilkSummary(
        total_quantity=round(total, 2),
        average_quantity=round(total / count, 2) if count else 0.0,
        good_or_better_pct=round(good_or_better / (count or 1) * 100, 1),
        record_count=count,
        today_total=round(milk_total_on(records, today or utc_today()), 2),
        average_quality=average_quality(records),
    )


def daily_milk_totals(
    records: Sequence[MilkRecord],
    end_date: Optional[date] = None,
    days: int = 7,
) -> List[DailyTotal]:
    """
    Liters per day for the ``days`` days ending on ``end_date``, oldest first.

    Days are matched with :func:`recorded_on`, the same rule as
    ``today_total``.
    """
    end_date = end_date or utc_today()
    totals = []
    for offset in range(days - 1, -1, -1):
        day = end_date - timedelta(days=offset)
        quantity = sum(r.quantity for r in records if recorded_on(r.timestamp, day))
        totals.append(DailyTotal(day=day, quantity=round(quantity, 2)))
    return totals


def quality_distribution(records: Iterable[MilkRecord]) -> Dict[str, int]:
    counts = OrderedDict((q, 0) for q in MILK_QUALITIES)
    for r in records:
        if r.quality in counts:
            counts[r.quality] += 1
    return dict(counts)


def session_totals(records: Iterable[MilkRecord]) -> Dict[str, float]:
    totals = OrderedDict((s, 0.0) for s in MILK_SESSIONS)
    for r in records:
        if r.session in totals:
            totals[r.session] += r.quantity
    return {s: round(q, 2) for s, q in totals.items()}


def top_producers(records: Iterable[MilkRecord], limit: int = 5) -> List[Tuple[str, float]]:
    """Cattle names with the largest total yield, highest first."""
    production: Dict[str, float] = {}
    for r in records:
        production[r.cattle_name] = production.get(r.cattle_name, 0.0) + r.quantity
    ranked = sorted(production.items(), key=lambda item: item[1], reverse=True)
    return [(name, round(qty, 2)) for name, qty in ranked[:limit]]


def health_status_distribution(records: Iterable[HealthRecord]) -> Dict[str, int]:
    counts = OrderedDict((s, 0) for s in HEALTH_STATUSES)
    for r in records:
        if r.health_status in counts:
            counts[r.health_status] += 1
    return dict(counts)


def breed_counts(cattle: Iterable[Cattle]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for c in cattle:
        counts[c.breed] = counts.get(c.breed, 0) + 1
    return counts


# =============================================================================
# SERVICE
# =============================================================================

class AnalyticsService:
    """Fetches collections and assembles dashboard figures."""

    def __init__(self, farm_repository: FarmRepository, herd_service: HerdService):
        self._repo = farm_repository
        self._herd = herd_service

    async def herd_overview(self, session: Session) -> HerdStats:
        return herd_stats(await self._herd.get_cattle_for_session(session))

    async def milk_overview(self, session: Session, today: Optional[date] = None) -> MilkOverview:
        records = await self._herd.get_milk_records_for_session(session)
        today = today or utc_today()
        return MilkOverview(
            summary=milk_summary(records, today),
            daily_totals=daily_milk_totals(records, today),
            quality_distribution=quality_distribution(records),
            session_totals=session_totals(records),
            top_producers=top_producers(records),
        )

    async def health_overview(self) -> HealthOverview:
        records = await self._repo.fetch_health_records()
        return HealthOverview(
            status_distribution=health_status_distribution(records),
            alert_count=len(select_health_alerts(records)),
            total_records=len(records),
        )

    async def admin_overview(self) -> AdminOverview:
        """Counts across every collection, fetched concurrently."""
        cattle, owners, users, milk, health, treatments = await asyncio.gather(
            self._repo.fetch_cattle_database(),
            self._repo.fetch_owners(),
            self._repo.fetch_users(),
            self._repo.fetch_milk_records(),
            self._repo.fetch_health_records(),
            self._repo.fetch_treatments(),
        )
        return AdminOverview(
            total_cattle=len(cattle),
            total_owners=len(owners),
            total_users=len(users),
            total_milk_records=len(milk),
            total_health_records=len(health),
            total_treatments=len(treatments),
            unassigned_cattle=sum(1 for c in cattle if not c.owner_id),
            breeds=breed_counts(cattle),
        )
