"""
Owners router - owner listing, creation and owner-scoped views.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from herd_monitor.core.auth import verify_api_key
from herd_monitor.core.dependencies import (
    get_farm_repository,
    get_herd_service,
    get_registry_service,
)
from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import Cattle, CommandResult, MilkRecord, Owner, OwnerCreate, RFIDLog
from herd_monitor.services import HerdService, RegistryService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/owners",
    tags=["Owners"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=List[Owner], summary="List owners")
async def list_owners(repo: FarmRepository = Depends(get_farm_repository)):
    return await repo.fetch_owners()


@router.post("", response_model=CommandResult, summary="Add an owner with a caller-chosen id")
async def create_owner(
    owner: Owner,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.add_owner(owner)


@router.post(
    "/auto-id",
    response_model=CommandResult,
    summary="Add an owner under the next OWN### id",
)
async def create_owner_with_generated_id(
    owner: OwnerCreate,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.add_owner_with_id(owner)


@router.get("/{owner_id}/cattle", response_model=List[Cattle], summary="Owner's cattle")
async def owner_cattle(owner_id: str, herd: HerdService = Depends(get_herd_service)):
    return await herd.get_cattle_by_owner(owner_id)


@router.get("/{owner_id}/logs", response_model=List[RFIDLog], summary="Gate logs of the owner's cattle")
async def owner_logs(owner_id: str, herd: HerdService = Depends(get_herd_service)):
    return await herd.get_logs_by_owner(owner_id)


@router.get("/{owner_id}/milk", response_model=List[MilkRecord], summary="Milk records of the owner's cattle")
async def owner_milk(owner_id: str, herd: HerdService = Depends(get_herd_service)):
    return await herd.get_milk_records_by_owner(owner_id)
