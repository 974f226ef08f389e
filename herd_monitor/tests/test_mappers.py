"""
Tests for row and JSON mappers and numeric coercion.
"""
import pytest

from herd_monitor.repositories.mappers import (
    cattle_from_api,
    cattle_from_row,
    health_record_from_row,
    int_or_none,
    int_or_zero,
    milk_record_from_row,
    owner_from_row,
    parse_float,
    parse_int,
    session_from_api,
    treatment_from_row,
    user_from_api,
)


# =============================================================================
# NUMERIC COERCION
# =============================================================================

@pytest.mark.parametrize("value, expected", [
    ("12", 12),
    ("12abc", 12),
    (" 7", 7),
    ("-3", -3),
    ("4.9", 4),
    ("abc", None),
    ("", None),
    (None, None),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("37.5", 37.5),
    ("37.5C", 37.5),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("x", None),
    ("", None),
])
def test_parse_float(value, expected):
    assert parse_float(value) == expected


def test_zero_and_none_fallbacks():
    assert int_or_zero("") == 0
    assert int_or_zero("n/a") == 0
    assert int_or_none("0") is None
    assert int_or_none("") is None
    assert int_or_none("18") == 18


# =============================================================================
# SHEET ROWS
# =============================================================================

class TestRowMappers:

    def test_owner_row(self):
        owner = owner_from_row(["OWN001", "Rajesh Kumar", "+91-98", "Village A", "r@example.com"])
        assert owner.owner_id == "OWN001"
        assert owner.email == "r@example.com"

    def test_short_owner_row_defaults_to_empty(self):
        owner = owner_from_row(["OWN009", "Asha"])
        assert owner.phone == ""
        assert owner.email == ""

    def test_cattle_row_with_missing_columns(self):
        cattle = cattle_from_row(["E1", "Bella"])
        assert cattle.rfid == "E1"
        assert cattle.cattle_name == "Bella"
        assert cattle.age == 0
        assert cattle.weight == 0
        assert cattle.health_status == "Healthy"
        assert cattle.owner_id == ""

    def test_cattle_row_with_unparseable_numbers(self):
        cattle = cattle_from_row(["E1", "Bella", "Jersey", "4yrs", "heavy", "Sick", "OWN001"])
        assert cattle.age == 4
        assert cattle.weight == 0
        assert cattle.health_status == "Sick"
        assert cattle.owner_id == "OWN001"

    def test_unknown_enum_value_passes_through(self):
        cattle = cattle_from_row(["E1", "Bella", "Jersey", "4", "380", "Lame", "OWN001"])
        assert cattle.health_status == "Lame"

    def test_milk_row(self):
        record = milk_record_from_row([
            "M001", "2024-12-29T06:00:00.000Z", "E1", "Bella", "25.5", "Excellent", "37.2", "Morning", "Ravi",
        ])
        assert record.quantity == 25.5
        assert record.temperature == 37.2
        assert record.session == "Morning"
        assert record.recorded_by == "Ravi"

    def test_health_row_optional_columns(self):
        record = health_record_from_row([
            "H001", "2024-12-29T06:00:00.000Z", "E1", "Bella", "38.5", "72", "0", "", "Sick", "High",
        ])
        assert record.temperature == 38.5
        assert record.heart_rate == 72
        assert record.respiratory_rate is None
        assert record.body_condition_score is None
        assert record.symptoms is None
        assert record.notes is None
        assert record.recorded_by == ""

    def test_health_row_empty_text_column_is_empty_string(self):
        record = health_record_from_row([
            "H001", "", "E1", "Bella", "38.5", "72", "28", "3", "Healthy", "Low", "", "", "", "", "Dr. Rao",
        ])
        assert record.respiratory_rate == 28
        assert record.body_condition_score == 3
        assert record.symptoms == ""
        assert record.recorded_by == "Dr. Rao"

    def test_treatment_row(self):
        treatment = treatment_from_row([
            "T001", "2024-12-28T10:00:00.000Z", "E1", "Bella", "Oxytetracycline", "10ml", "5 days", "Dr. Rao",
        ])
        assert treatment.medication == "Oxytetracycline"
        assert treatment.follow_up_date is None


# =============================================================================
# SCRIPT ENDPOINT OBJECTS
# =============================================================================

class TestApiMappers:

    def test_cattle_from_api(self):
        cattle = cattle_from_api({
            "rfid": "E1",
            "cattleName": "Bella",
            "breed": "Jersey",
            "age": "5",
            "weight": 380,
            "healthStatus": "",
            "ownerId": None,
            "location": "Barn",
        })
        assert cattle.age == 5
        assert cattle.weight == 380
        assert cattle.health_status == "Healthy"
        assert cattle.owner_id == ""
        assert cattle.location == "Barn"
        assert cattle.activity_status is None

    def test_user_from_api(self):
        user = user_from_api({
            "userId": "USER002",
            "username": "ravi",
            "fullName": "Ravi Patel",
            "userRole": "farmer",
            "ownerId": "",
        })
        assert user.user_id == "USER002"
        assert user.full_name == "Ravi Patel"
        assert user.owner_id is None
        assert user.status == "active"

    def test_user_password_is_never_serialized(self):
        user = user_from_api({"userId": "USER001", "username": "admin", "password": "hunter2"})
        assert user.password == "hunter2"
        assert "password" not in user.to_wire()
        assert "password" not in user.model_dump()

    def test_session_from_api_coerces_numbers(self):
        session = session_from_api({"userId": 3, "username": 1234, "userRole": "vet", "ownerId": 0})
        assert session.user_id == "3"
        assert session.username == "1234"
        assert session.role == "vet"
        assert session.owner_id == "0"
        assert session.full_name is None

    def test_session_from_api_falls_back_to_given_username(self):
        session = session_from_api({"userId": "USER003", "role": "farmer"}, "meera")
        assert session.username == "meera"
        assert session.owner_id is None
