"""
Static fallback collections served when a sheet is empty or unreachable.

There is deliberately no mock cattle set: an unreachable cattle database
reads as empty so nobody mistakes sample animals for the real herd.
Relative timestamps are fixed when the module is imported.
"""
from datetime import timedelta
from typing import Tuple

from herd_monitor.core.datetime_utils import iso_from_now
from herd_monitor.schemas import HealthRecord, MilkRecord, Owner, RFIDLog, TreatmentRecord

MOCK_OWNERS: Tuple[Owner, ...] = (
    Owner(owner_id="OWN001", owner_name="Rajesh Kumar", phone="+91-9876543210",
          address="Village Rampur, UP", email="rajesh@email.com"),
    Owner(owner_id="OWN002", owner_name="Priya Sharma", phone="+91-9876543211",
          address="Village Sultanpur, HR", email="priya@email.com"),
)

MOCK_LOGS: Tuple[RFIDLog, ...] = (
    RFIDLog(timestamp=iso_from_now(), location="Entry", rfid="E2000019060401821860959A",
            cattle_name="Bella", breed="Holstein Friesian", owner_name="Rajesh Kumar"),
    RFIDLog(timestamp=iso_from_now(), location="Exit", rfid="E2000019060401821860959B",
            cattle_name="Daisy", breed="Jersey", owner_name="Rajesh Kumar"),
    RFIDLog(timestamp=iso_from_now(-timedelta(hours=1)), location="Entry", rfid="E2000019060401821860959C",
            cattle_name="Buttercup", breed="Gir", owner_name="Rajesh Kumar"),
    RFIDLog(timestamp=iso_from_now(-timedelta(hours=2)), location="Exit", rfid="E2000019060401821860959D",
            cattle_name="Rosie", breed="Ayrshire", owner_name="Rajesh Kumar"),
)

MOCK_MILK_RECORDS: Tuple[MilkRecord, ...] = (
    MilkRecord(id="M001", timestamp=iso_from_now(), rfid="E2000019060401821860959A",
               cattle_name="Bella", quantity=25.5, quality="Excellent", temperature=37.2,
               session="Morning", recorded_by="OWN001"),
    MilkRecord(id="M002", timestamp=iso_from_now(), rfid="E2000019060401821860959B",
               cattle_name="Daisy", quantity=22.0, quality="Good", temperature=37.0,
               session="Morning", recorded_by="OWN001"),
    MilkRecord(id="M003", timestamp=iso_from_now(-timedelta(hours=12)), rfid="E2000019060401821860959A",
               cattle_name="Bella", quantity=24.0, quality="Excellent", temperature=37.1,
               session="Evening", recorded_by="OWN001"),
    MilkRecord(id="M004", timestamp=iso_from_now(-timedelta(hours=12)), rfid="E2000019060401821860959C",
               cattle_name="Buttercup", quantity=20.5, quality="Good", temperature=37.3,
               session="Evening", recorded_by="OWN001"),
    MilkRecord(id="M005", timestamp=iso_from_now(-timedelta(days=1)), rfid="E2000019060401821860959D",
               cattle_name="Rosie", quantity=18.0, quality="Fair", temperature=37.5,
               session="Morning", recorded_by="OWN001"),
)

MOCK_HEALTH_RECORDS: Tuple[HealthRecord, ...] = (
    HealthRecord(
        id="H001",
        timestamp=iso_from_now(),
        rfid="E2000019060401821860959A",
        cattle_name="Bella",
        temperature=38.5,
        heart_rate=65,
        respiratory_rate=25,
        body_condition_score=4,
        health_status="Healthy",
        risk_level="Low",
        symptoms="None",
        diagnosis="Routine checkup - All vitals normal",
        notes="Excellent condition",
        recorded_by="VET001",
    ),
    HealthRecord(
        id="H002",
        timestamp=iso_from_now(-timedelta(days=1)),
        rfid="E2000019060401821860960C",
        cattle_name="Petunia",
        temperature=39.8,
        heart_rate=85,
        respiratory_rate=35,
        body_condition_score=3,
        health_status="Sick",
        risk_level="High",
        symptoms="Elevated temperature, rapid breathing",
        diagnosis="Suspected respiratory infection",
        treatment="Antibiotics prescribed",
        notes="Monitor closely, follow-up in 3 days",
        recorded_by="VET001",
    ),
)

MOCK_TREATMENTS: Tuple[TreatmentRecord, ...] = (
    TreatmentRecord(
        id="T001",
        timestamp=iso_from_now(-timedelta(days=1)),
        rfid="E2000019060401821860960C",
        cattle_name="Petunia",
        medication="Amoxicillin",
        dosage="500mg twice daily",
        duration="7 days",
        administered_by="VET001",
        follow_up_date=iso_from_now(timedelta(days=2)),
        notes="Complete full course even if symptoms improve",
    ),
)
