"""
Authentication module for the herd monitor API.

Provides API key authentication for securing endpoints, and the session
dependency that carries the signed-in user's identity into dashboard
routes.
"""
import logging
import secrets
from typing import Optional

from fastapi import Header, HTTPException, Security, status
from fastapi.security import APIKeyHeader

from herd_monitor.core.config import API_KEY
from herd_monitor.schemas import Session

logger = logging.getLogger(__name__)

# Header name for API key authentication
API_KEY_HEADER_NAME = "X-API-Key"

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER_NAME,
    auto_error=False,  # We'll handle the error ourselves for better messages
    description="API key for authenticating requests. Include in the X-API-Key header.",
)


async def verify_api_key(
    api_key: Optional[str] = Security(api_key_header),
) -> str:
    """
    Check the X-API-Key header against the configured key.
    
    Every router except health depends on this. The comparison is
    constant-time.
    
    Args:
        api_key: Value of the X-API-Key header, None when absent.
        
    Returns:
        str: The accepted API key.
        
    Raises:
        HTTPException: 401 Unauthorized if key is missing.
        HTTPException: 403 Forbidden if key is invalid.
    """
    if api_key is None:
        logger.warning("API request without authentication header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key. Include it in the X-API-Key header.",
            headers={"WWW-Authenticate": "ApiKey"},
        )
    
    if not secrets.compare_digest(api_key, API_KEY):
        logger.warning("API request with invalid API key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )
    
    return api_key


async def get_session(
    x_user_id: Optional[str] = Header(None, description="userId returned by /api/v1/auth/login"),
    x_user_role: Optional[str] = Header(None, description="admin, farmer or vet"),
    x_owner_id: Optional[str] = Header(None, description="ownerId linked to a farmer"),
) -> Session:
    """
    Session for the calling user, rebuilt from the identity headers the
    client received at login.
    
    Raises:
        HTTPException: 401 if the user id or role header is missing.
    """
    if not x_user_id or not x_user_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing session. Send X-User-Id and X-User-Role from the login response.",
        )
    return Session(user_id=x_user_id, role=x_user_role, owner_id=x_owner_id or None)
