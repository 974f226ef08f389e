"""
Schemas for dashboard users.

Passwords are opaque strings; storage and hashing belong to the remote
script.
"""
from typing import Optional

from pydantic import Field

from herd_monitor.schemas.base import SheetRecord

USER_ID_PREFIX = "USER"
USER_ROLES = ("admin", "farmer", "vet")
USER_STATUSES = ("active", "inactive")


class User(SheetRecord):
    """A row of the user table. ``password`` is readable but never serialized."""
    user_id: str
    username: str = ""
    password: str = Field("", exclude=True)
    full_name: str = ""
    email: str = ""
    phone: str = ""
    user_role: str = "farmer"
    owner_id: Optional[str] = None
    created_at: str = ""
    status: str = "active"


class UserCreate(SheetRecord):
    """Admin-side user creation. ``user_id``, ``created_at`` and ``status`` are assigned remotely."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    full_name: str = ""
    email: str = ""
    phone: str = ""
    user_role: str = "farmer"
    owner_id: Optional[str] = None


class UserRegistration(SheetRecord):
    """Public self-registration form."""
    full_name: str
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: str = ""
    user_role: str = "farmer"
    address: Optional[str] = None


class UserUpdate(SheetRecord):
    """Partial update for a user row. Only set fields are sent."""
    username: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    user_role: Optional[str] = None
    owner_id: Optional[str] = None
    status: Optional[str] = None
