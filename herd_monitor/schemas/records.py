"""
Schemas for event records: RFID gate logs, milk, health checks and treatments.

All ``rfid`` fields are weak references to Cattle. Timestamps are kept as
the ISO-8601 strings the sheet holds.
"""
from typing import Optional

from pydantic import Field

from herd_monitor.schemas.base import SheetRecord

MILK_QUALITIES = ("Excellent", "Good", "Fair", "Poor")
MILK_SESSIONS = ("Morning", "Evening")
HEALTH_STATUSES = ("Healthy", "Under Observation", "Sick", "Critical")
RISK_LEVELS = ("Low", "Medium", "High", "Critical")

# A health record raises an alert when either field matches
ALERT_RISK_LEVELS = ("High", "Critical")
ALERT_HEALTH_STATUSES = ("Sick", "Critical")


class RFIDLog(SheetRecord):
    """A gate reading. Name, breed and owner are a snapshot, not a join."""
    timestamp: str
    location: str = Field("", description="Entry/Exit or a named zone")
    rfid: str = ""
    cattle_name: str = ""
    breed: str = ""
    owner_name: str = ""


class MilkRecord(SheetRecord):
    """One milking session for one animal."""
    id: Optional[str] = None
    timestamp: str = ""
    rfid: str
    cattle_name: str = ""
    quantity: float = Field(0.0, description="Liters")
    quality: str = Field("Good", description="Excellent/Good/Fair/Poor")
    temperature: float = Field(0.0, description="Celsius")
    session: str = Field("Morning", description="Morning/Evening")
    recorded_by: str = ""


class HealthRecord(SheetRecord):
    """A veterinary check."""
    id: Optional[str] = None
    timestamp: str = ""
    rfid: str
    cattle_name: str = ""
    temperature: float = 0.0
    heart_rate: int = Field(0, description="Beats per minute")
    respiratory_rate: Optional[int] = Field(None, description="Breaths per minute")
    body_condition_score: Optional[int] = Field(None, description="1-5 scale")
    health_status: str = "Healthy"
    risk_level: str = "Low"
    symptoms: Optional[str] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None
    recorded_by: str = ""


class TreatmentRecord(SheetRecord):
    """A course of medication."""
    id: Optional[str] = None
    timestamp: str = ""
    rfid: str
    cattle_name: str = ""
    medication: str = ""
    dosage: str = ""
    duration: str = ""
    administered_by: str = ""
    follow_up_date: Optional[str] = None
    notes: Optional[str] = None
