"""
Sign-in endpoint.

Credentials are checked by the script endpoint; the response is the
session the client sends back as X-User-Id / X-User-Role / X-Owner-Id.
"""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from herd_monitor.core.auth import verify_api_key
from herd_monitor.core.dependencies import get_user_service
from herd_monitor.core.exceptions import InvalidCredentialsError
from herd_monitor.schemas import Session
from herd_monitor.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/auth",
    tags=["Auth"],
    dependencies=[Depends(verify_api_key)],
)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


@router.post("/login", response_model=Session, summary="Sign in")
async def login(
    credentials: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Returns the session for valid credentials.

    Raises 401 when the script endpoint rejects them.
    """
    session = await user_service.login(credentials.username, credentials.password)
    if session is None:
        raise InvalidCredentialsError()
    return session
