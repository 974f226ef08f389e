"""
Users router - admin user management and public registration.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from herd_monitor.core.auth import verify_api_key
from herd_monitor.core.dependencies import get_user_service
from herd_monitor.schemas import CommandResult, User, UserCreate, UserRegistration, UserUpdate
from herd_monitor.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/users",
    tags=["Users"],
    dependencies=[Depends(verify_api_key)],
)


@router.get("", response_model=List[User], summary="List users")
async def list_users(user_service: UserService = Depends(get_user_service)):
    return await user_service.fetch_users()


@router.post("", response_model=CommandResult, summary="Create a user")
async def create_user(
    user: UserCreate,
    address: str = Query("", description="Address for an auto-created owner"),
    user_service: UserService = Depends(get_user_service),
):
    """
    Creates a user under the next USER### id.

    A farmer without an ownerId gets a new owner record first.
    """
    return await user_service.add_user(user, address=address)


@router.post("/register", response_model=CommandResult, summary="Self-registration")
async def register_user(
    registration: UserRegistration,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.register_user(registration)


@router.patch("/{user_id}", response_model=CommandResult, summary="Update a user")
async def update_user(
    user_id: str,
    updates: UserUpdate,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.update_user(user_id, updates)


@router.post("/{user_id}/deactivate", response_model=CommandResult, summary="Deactivate a user")
async def deactivate_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    return await user_service.deactivate_user(user_id)
