"""
Pydantic schemas for the farm data model.

Records are immutable once constructed. Attribute names are snake_case;
the wire format (sheet headers, script parameters) is camelCase.
"""
from herd_monitor.schemas.base import SheetRecord
from herd_monitor.schemas.owner import Owner, OwnerCreate, OWNER_ID_PREFIX
from herd_monitor.schemas.cattle import (
    Cattle,
    CattleUpdate,
    CATTLE_HEALTH_STATUSES,
    NEEDS_CARE_STATUSES,
)
from herd_monitor.schemas.records import (
    RFIDLog,
    MilkRecord,
    HealthRecord,
    TreatmentRecord,
    MILK_QUALITIES,
    MILK_SESSIONS,
    HEALTH_STATUSES,
    RISK_LEVELS,
    ALERT_RISK_LEVELS,
    ALERT_HEALTH_STATUSES,
)
from herd_monitor.schemas.user import (
    User,
    UserCreate,
    UserRegistration,
    UserUpdate,
    USER_ID_PREFIX,
    USER_ROLES,
)
from herd_monitor.schemas.command import CommandResult
from herd_monitor.schemas.session import Session

__all__ = [
    "SheetRecord",
    # Owners
    "Owner",
    "OwnerCreate",
    "OWNER_ID_PREFIX",
    # Cattle
    "Cattle",
    "CattleUpdate",
    "CATTLE_HEALTH_STATUSES",
    "NEEDS_CARE_STATUSES",
    # Records
    "RFIDLog",
    "MilkRecord",
    "HealthRecord",
    "TreatmentRecord",
    "MILK_QUALITIES",
    "MILK_SESSIONS",
    "HEALTH_STATUSES",
    "RISK_LEVELS",
    "ALERT_RISK_LEVELS",
    "ALERT_HEALTH_STATUSES",
    # Users
    "User",
    "UserCreate",
    "UserRegistration",
    "UserUpdate",
    "USER_ID_PREFIX",
    "USER_ROLES",
    # Envelope / session
    "CommandResult",
    "Session",
]
