"""
Cattle router - master database reads and writes.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from herd_monitor.core.auth import verify_api_key
from herd_monitor.core.dependencies import get_farm_repository, get_herd_service, get_registry_service
from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import Cattle, CattleUpdate, CommandResult
from herd_monitor.services import HerdService, RegistryService, get_cattle_image

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/cattle",
    tags=["Cattle"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=List[Cattle], summary="List cattle")
async def list_cattle(
    owner_id: Optional[str] = Query(None, description="Only this owner's cattle"),
    unassigned: bool = Query(False, description="Only cattle without an owner"),
    repo: FarmRepository = Depends(get_farm_repository),
    herd: HerdService = Depends(get_herd_service),
):
    if owner_id is not None:
        return await herd.get_cattle_by_owner(owner_id)
    cattle = await repo.fetch_cattle_database()
    if unassigned:
        return [c for c in cattle if not c.owner_id]
    return cattle


@router.post("", response_model=CommandResult, summary="Add cattle")
async def create_cattle(cattle: Cattle, registry: RegistryService = Depends(get_registry_service)):
    return await registry.add_cattle(cattle)


@router.post(
    "/rfid",
    response_model=CommandResult,
    summary="Register a tag in the master database, unassigned",
)
async def create_rfid_cattle(cattle: Cattle, registry: RegistryService = Depends(get_registry_service)):
    return await registry.add_rfid_cattle(cattle)


@router.patch("/{rfid}", response_model=CommandResult, summary="Update cattle fields")
async def update_cattle(
    rfid: str,
    updates: CattleUpdate,
    registry: RegistryService = Depends(get_registry_service),
):
    return await registry.update_cattle(rfid, updates)


@router.delete("/{rfid}", response_model=CommandResult, summary="Delete cattle")
async def delete_cattle(rfid: str, registry: RegistryService = Depends(get_registry_service)):
    return await registry.delete_cattle(rfid)


@router.get("/image", summary="Image path for a breed/RFID pair")
async def cattle_image(
    breed: str = Query(..., examples=["Jersey"]),
    rfid: str = Query(..., examples=["E2000019060401821860959A"]),
):
    return {"breed": breed, "rfid": rfid, "image": get_cattle_image(breed, rfid)}
