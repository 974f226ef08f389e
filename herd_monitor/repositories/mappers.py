"""
Positional row mappers for each sheet tab, plus mappers for the JSON
objects the script endpoint returns.

Parsing is lossy on purpose: a numeric column that does not parse becomes
0, and enum columns are passed through unchecked. No mapper raises.
"""
import re
from typing import Any, Mapping, Optional, Sequence

from herd_monitor.schemas import (
    Cattle,
    HealthRecord,
    MilkRecord,
    Owner,
    RFIDLog,
    Session,
    TreatmentRecord,
    User,
)

# Leading numeric prefix, the same way browsers read "12abc" as 12
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


# =============================================================================
# FIELD COERCION
# =============================================================================

def parse_int(value: Any) -> Optional[int]:
    """Integer from the leading digits of ``value``, or None."""
    if value is None:
        return None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def parse_float(value: Any) -> Optional[float]:
    """Float from the leading numeric prefix of ``value``, or None."""
    if value is None:
        return None
    match = _FLOAT_PREFIX.match(str(value))
    return float(match.group(1)) if match else None


def int_or_zero(value: Any) -> int:
    return parse_int(value) or 0


def float_or_zero(value: Any) -> float:
    return parse_float(value) or 0.0


def int_or_none(value: Any) -> Optional[int]:
    """Like :func:`parse_int`, but 0 also means "not recorded"."""
    return parse_int(value) or None


def _col(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _optional_col(row: Sequence[str], index: int) -> Optional[str]:
    return row[index] if index < len(row) else None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


# =============================================================================
# SHEET ROW MAPPERS
# =============================================================================
# Column order follows each tab's header row.

def owner_from_row(row: Sequence[str]) -> Owner:
    # ownerId, ownerName, phone, address, email
    return Owner(
        owner_id=_col(row, 0),
        owner_name=_col(row, 1),
        phone=_col(row, 2),
        address=_col(row, 3),
        email=_col(row, 4),
    )


def cattle_from_row(row: Sequence[str]) -> Cattle:
    # rfid, cattleName, breed, age, weight, healthStatus, ownerId
    return Cattle(
        rfid=_col(row, 0),
        cattle_name=_col(row, 1),
        breed=_col(row, 2),
        age=int_or_zero(_col(row, 3)),
        weight=int_or_zero(_col(row, 4)),
        health_status=_col(row, 5) or "Healthy",
        owner_id=_col(row, 6),
    )


def rfid_log_from_row(row: Sequence[str]) -> RFIDLog:
    # timestamp, location, rfid, cattleName, breed, ownerName
    return RFIDLog(
        timestamp=_col(row, 0),
        location=_col(row, 1),
        rfid=_col(row, 2),
        cattle_name=_col(row, 3),
        breed=_col(row, 4),
        owner_name=_col(row, 5),
    )


def milk_record_from_row(row: Sequence[str]) -> MilkRecord:
    # id, timestamp, rfid, cattleName, quantity, quality, temperature, session, recordedBy
    return MilkRecord(
        id=_col(row, 0),
        timestamp=_col(row, 1),
        rfid=_col(row, 2),
        cattle_name=_col(row, 3),
        quantity=float_or_zero(_col(row, 4)),
        quality=_col(row, 5),
        temperature=float_or_zero(_col(row, 6)),
        session=_col(row, 7),
        recorded_by=_col(row, 8),
    )


def health_record_from_row(row: Sequence[str]) -> HealthRecord:
    # id, timestamp, rfid, cattleName, temperature, heartRate, respiratoryRate,
    # bodyConditionScore, healthStatus, riskLevel, symptoms, diagnosis,
    # treatment, notes, recordedBy
    return HealthRecord(
        id=_col(row, 0),
        timestamp=_col(row, 1),
        rfid=_col(row, 2),
        cattle_name=_col(row, 3),
        temperature=float_or_zero(_col(row, 4)),
        heart_rate=int_or_zero(_col(row, 5)),
        respiratory_rate=int_or_none(_col(row, 6)),
        body_condition_score=int_or_none(_col(row, 7)),
        health_status=_col(row, 8),
        risk_level=_col(row, 9),
        symptoms=_optional_col(row, 10),
        diagnosis=_optional_col(row, 11),
        treatment=_optional_col(row, 12),
        notes=_optional_col(row, 13),
        recorded_by=_col(row, 14),
    )


def treatment_from_row(row: Sequence[str]) -> TreatmentRecord:
    # id, timestamp, rfid, cattleName, medication, dosage, duration,
    # administeredBy, followUpDate, notes
    return TreatmentRecord(
        id=_col(row, 0),
        timestamp=_col(row, 1),
        rfid=_col(row, 2),
        cattle_name=_col(row, 3),
        medication=_col(row, 4),
        dosage=_col(row, 5),
        duration=_col(row, 6),
        administered_by=_col(row, 7),
        follow_up_date=_optional_col(row, 8),
        notes=_optional_col(row, 9),
    )


# =============================================================================
# SCRIPT ENDPOINT OBJECT MAPPERS
# =============================================================================

def cattle_from_api(item: Mapping[str, Any]) -> Cattle:
    """Cattle from a ``getCattle`` JSON object (camelCase keys)."""
    return Cattle(
        rfid=_text(item.get("rfid")),
        cattle_name=_text(item.get("cattleName")),
        breed=_text(item.get("breed")),
        age=int_or_zero(item.get("age")),
        weight=int_or_zero(item.get("weight")),
        health_status=_text(item.get("healthStatus")) or "Healthy",
        owner_id=_text(item.get("ownerId")),
        location=_optional_text(item.get("location")),
        activity_status=_optional_text(item.get("activityStatus")),
    )


def user_from_api(item: Mapping[str, Any]) -> User:
    """User from a ``getUsers`` JSON object (camelCase keys)."""
    return User(
        user_id=_text(item.get("userId")),
        username=_text(item.get("username")),
        password=_text(item.get("password")),
        full_name=_text(item.get("fullName")),
        email=_text(item.get("email")),
        phone=_text(item.get("phone")),
        user_role=_text(item.get("userRole")),
        owner_id=_optional_text(item.get("ownerId")) or None,
        created_at=_text(item.get("createdAt")),
        status=_text(item.get("status")) or "active",
    )


def session_from_api(item: Mapping[str, Any], username: str = "") -> Session:
    """Session from the ``user`` object of a successful ``login`` reply.

    The sheet may hand back numeric cells as numbers, so every field is
    coerced to text. ``username`` is used when the reply omits it.
    """
    return Session(
        user_id=_text(item.get("userId")),
        role=_text(item.get("role") or item.get("userRole")),
        owner_id=_optional_text(item.get("ownerId")) or None,
        username=_text(item.get("username")) or username,
        full_name=_optional_text(item.get("fullName")),
    )
