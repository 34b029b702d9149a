"""Unit tests for the Appointment record."""

from datetime import datetime, timedelta, timezone

import pytest

from roster.domain import Appointment, FixedClock, ValidationError

NOW = datetime(2030, 6, 1, 9, 30, tzinfo=timezone.utc)
CLOCK = FixedClock(NOW)


def _appointment(**overrides) -> Appointment:
    values = {
        "id": "APPT12345",
        "date": NOW + timedelta(days=1),
        "description": "Routine checkup with Dr. Smith",
    }
    values.update(overrides)
    return Appointment(**values, clock=CLOCK)


def test_valid_appointment_creation() -> None:
    appt = _appointment()
    assert appt.id == "APPT12345"
    assert appt.date == NOW + timedelta(days=1)
    assert appt.description == "Routine checkup with Dr. Smith"


def test_date_one_day_in_past_rejected() -> None:
    with pytest.raises(ValidationError, match="Appointment date cannot be in the past"):
        _appointment(date=NOW - timedelta(days=1))


def test_date_equal_to_now_accepted() -> None:
    assert _appointment(date=NOW).date == NOW


def test_null_date_rejected() -> None:
    with pytest.raises(ValidationError, match="Appointment date cannot be null"):
        _appointment(date=None)


def test_id_rules() -> None:
    with pytest.raises(ValidationError, match="Appointment ID cannot be null or empty"):
        _appointment(id=None)
    with pytest.raises(ValidationError, match="Appointment ID cannot be null or empty"):
        _appointment(id="   ")
    with pytest.raises(ValidationError, match="Appointment ID cannot exceed 10 characters"):
        _appointment(id="12345678901")


def test_description_rules() -> None:
    with pytest.raises(ValidationError, match="Description cannot be null or empty"):
        _appointment(description=None)
    with pytest.raises(ValidationError, match="Description cannot be null or empty"):
        _appointment(description="   ")
    with pytest.raises(ValidationError, match="Description cannot exceed 50 characters"):
        _appointment(description="d" * 51)


def test_set_date_uses_record_clock() -> None:
    appt = _appointment()
    later = NOW + timedelta(days=7)
    appt.date = later
    assert appt.date == later

    with pytest.raises(ValidationError, match="cannot be in the past"):
        appt.date = NOW - timedelta(minutes=1)
    assert appt.date == later


def test_naive_datetimes_are_local_time() -> None:
    local_now = datetime(2030, 6, 1, 9, 30)
    clock = FixedClock(local_now)
    appt = Appointment("A1", local_now + timedelta(hours=1), "Naive", clock=clock)
    assert appt.date == local_now + timedelta(hours=1)
    with pytest.raises(ValidationError):
        Appointment("A2", local_now - timedelta(hours=1), "Naive", clock=clock)


def test_system_clock_with_tolerant_window() -> None:
    tomorrow = datetime.now(timezone.utc) + timedelta(days=1)
    yesterday = datetime.now(timezone.utc) - timedelta(days=1)
    assert Appointment("A1", tomorrow, "Soon").date == tomorrow
    with pytest.raises(ValidationError, match="cannot be in the past"):
        Appointment("A2", yesterday, "Too late")


def test_extreme_dates_raise_validation_error_or_pass() -> None:
    with pytest.raises(ValidationError, match="Appointment date cannot be in the past"):
        Appointment("A1", datetime.min, "Ancient")
    assert Appointment("A2", datetime.max, "Far off").date == datetime.max
