"""
Dashboard router - aggregate figures per role.
"""
import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from herd_monitor.core.auth import get_session, verify_api_key
from herd_monitor.core.dependencies import get_analytics_service
from herd_monitor.schemas import Session
from herd_monitor.services import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("/herd", summary="Herd size and health counts")
async def herd_dashboard(
    session: Session = Depends(get_session),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    return asdict(await analytics.herd_overview(session))


@router.get("/milk", summary="Milk production figures")
async def milk_dashboard(
    session: Session = Depends(get_session),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    overview = await analytics.milk_overview(session)
    return {
        "summary": asdict(overview.summary),
        "dailyTotals": [
            {"date": d.day.isoformat(), "quantity": d.quantity} for d in overview.daily_totals
        ],
        "qualityDistribution": overview.quality_distribution,
        "sessionTotals": overview.session_totals,
        "topProducers": [{"cattleName": n, "quantity": q} for n, q in overview.top_producers],
    }


@router.get("/health", summary="Health status distribution and alert count")
async def health_dashboard(
    session: Session = Depends(get_session),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    return asdict(await analytics.health_overview())


@router.get("/admin", summary="Counts across every collection")
async def admin_dashboard(
    session: Session = Depends(get_session),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    if not session.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return asdict(await analytics.admin_overview())
