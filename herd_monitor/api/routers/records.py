"""
Event records router - gate logs, milk, health and treatments.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from herd_monitor.core.auth import get_session, verify_api_key
from herd_monitor.core.dependencies import get_farm_repository, get_herd_service, get_registry_service
from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import (
    CommandResult,
    HealthRecord,
    MilkRecord,
    RFIDLog,
    Session,
    TreatmentRecord,
)
from herd_monitor.services import HerdService, RegistryService
from herd_monitor.services.herd_service import recent

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1",
    tags=["Records"],
    dependencies=[Depends(verify_api_key)],
)


# =============================================================================
# GATE LOGS
# =============================================================================

@router.get("/logs", response_model=List[RFIDLog], summary="Recent gate logs for the caller")
async def list_logs(
    limit: int = Query(50, ge=1, le=1000, description="Newest N entries"),
    session: Session = Depends(get_session),
    herd: HerdService = Depends(get_herd_service),
):
    """Farmers see their own cattle's entries; vets and admins see all."""
    return recent(await herd.get_logs_for_session(session), limit)


# =============================================================================
# MILK
# =============================================================================

@router.get("/milk", response_model=List[MilkRecord], summary="Milk records for the caller")
async def list_milk_records(
    session: Session = Depends(get_session),
    herd: HerdService = Depends(get_herd_service),
):
    return await herd.get_milk_records_for_session(session)


@router.post("/milk", response_model=CommandResult, summary="Add a milk record")
async def create_milk_record(
    record: MilkRecord,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.add_milk_record(record)


# =============================================================================
# HEALTH
# =============================================================================

@router.get("/health-records", response_model=List[HealthRecord], summary="All health records")
async def list_health_records(repo: FarmRepository = Depends(get_farm_repository)):
    return await repo.fetch_health_records()


@router.get(
    "/health-records/alerts",
    response_model=List[HealthRecord],
    summary="Records with high risk or sick/critical status",
)
async def list_health_alerts(herd: HerdService = Depends(get_herd_service)):
    return await herd.get_health_alerts()


@router.post("/health-records", response_model=CommandResult, summary="Add a health record")
async def create_health_record(
    record: HealthRecord,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.add_health_record(record)


# =============================================================================
# TREATMENTS
# =============================================================================

@router.get("/treatments", response_model=List[TreatmentRecord], summary="All treatments")
async def list_treatments(repo: FarmRepository = Depends(get_farm_repository)):
    return await repo.fetch_treatments()


@router.post("/treatments", response_model=CommandResult, summary="Add a treatment")
async def create_treatment(
    treatment: TreatmentRecord,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.add_treatment(treatment)
