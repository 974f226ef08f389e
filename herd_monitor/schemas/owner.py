"""
Schemas for farm owners (the ``Owners`` tab).
"""
from pydantic import Field

from herd_monitor.schemas.base import SheetRecord

OWNER_ID_PREFIX = "OWN"


class Owner(SheetRecord):
    """A farm owner. ``owner_id`` has the form ``OWN###``."""
    owner_id: str = Field(..., description="Unique owner key", examples=["OWN001"])
    owner_name: str = Field("", examples=["Rajesh Kumar"])
    phone: str = ""
    address: str = ""
    email: str = ""


class OwnerCreate(SheetRecord):
    """Owner data without an id; the id is generated on insert."""
    owner_name: str = Field(..., examples=["Rajesh Kumar"])
    phone: str = ""
    address: str = ""
    email: str = ""
