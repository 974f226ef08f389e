"""
Schemas for cattle (the ``RFID_Database`` tab).
"""
from typing import Optional

from pydantic import Field

from herd_monitor.schemas.base import SheetRecord

# Open enum: unknown values from the sheet pass through unchanged
CATTLE_HEALTH_STATUSES = (
    "Healthy",
    "Sick",
    "Under Treatment",
    "Under Observation",
    "Pregnant",
    "Critical",
)

# Statuses counted as "needs care" on the dashboards
NEEDS_CARE_STATUSES = ("Sick", "Under Treatment", "Under Observation")


class Cattle(SheetRecord):
    """A single animal, keyed by its RFID tag.

    An empty ``owner_id`` means the animal sits unassigned in the master
    database.
    """
    rfid: str = Field(..., description="Opaque RFID tag", examples=["E2000019060401821860959A"])
    cattle_name: str = ""
    breed: str = ""
    age: int = Field(0, description="Age in years")
    weight: int = Field(0, description="Weight in kg")
    health_status: str = "Healthy"
    owner_id: str = ""
    location: Optional[str] = Field(None, description="Pasture, Barn, Milking Area, Sick Bay")
    activity_status: Optional[str] = Field(None, description="Grazing, Resting, Milking, ...")


class CattleUpdate(SheetRecord):
    """Partial update for a cattle row. Only set fields are sent."""
    cattle_name: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    weight: Optional[int] = Field(None, ge=0)
    health_status: Optional[str] = None
    owner_id: Optional[str] = None
    location: Optional[str] = None
    activity_status: Optional[str] = None
