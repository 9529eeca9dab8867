"""Unit tests for data models."""

import pytest

from medication_tracker.data.models import DailyLog, Medication, TimeOfDay, parse_count


# TC-MODEL-001: Record rendering
def test_medication_to_record():
    """Test medication renders as a five-field record."""
    med = Medication("Aspirin", "1 pill", "Morning", 29, 30)

    assert med.to_record() == "Aspirin,1 pill,Morning,29,30"


# TC-MODEL-002: Unparsable counts are coerced to zero
def test_from_record_coerces_bad_counts():
    """Test lenient parsing turns invalid counts into 0."""
    med = Medication.from_record(["Aspirin", "1 pill", "Morning", "abc", "-3"])

    assert med.current_count == 0
    assert med.total_prescribed == 0


# TC-MODEL-003: Strict parsing rejects bad counts
def test_from_record_strict_rejects_bad_counts():
    """Test strict parsing raises on invalid counts."""
    with pytest.raises(ValueError):
        Medication.from_record(["Aspirin", "1 pill", "Morning", "abc", "30"], strict=True)


def test_from_record_wrong_field_count():
    """Test wrong field count is rejected."""
    with pytest.raises(ValueError):
        Medication.from_record(["Aspirin", "1 pill", "Morning", "30"])


def test_parse_count():
    assert parse_count("42") == 42
    assert parse_count(" 7 ") == 7
    assert parse_count("") == 0
    assert parse_count("+5") == 5
    assert parse_count("4294967295") == 4294967295
    assert parse_count("4294967296") == 0
    assert parse_count("-1") == 0
    assert parse_count("\u0663") == 0


def test_parse_count_strict_rejects_overflow():
    with pytest.raises(ValueError):
        parse_count("4294967296", strict=True)


# TC-MODEL-004: Dose usage floors at zero
def test_take_dose_floors_at_zero():
    """Test taking a dose never goes below zero."""
    med = Medication("Aspirin", "1 pill", "Morning", 1, 30)

    med.take_dose()
    med.take_dose()

    assert med.current_count == 0


def test_refill_grows_both_counts():
    med = Medication("Aspirin", "1 pill", "Morning", 5, 30)

    med.refill(10)

    assert med.current_count == 15
    assert med.total_prescribed == 40


def test_display_strings():
    med = Medication("Aspirin", "1 pill", "Morning", 28, 30)

    assert med.details == "1 pill (Morning)"
    assert med.display_line() == "Aspirin - 1 pill at Morning (28 left)"


# TC-MODEL-005: Daily log records
def test_daily_log_records():
    """Test daily log renders one record per medication."""
    log = DailyLog(date="D1")
    log.set_taken("Aspirin", True)
    log.set_taken("Metformin", False)

    assert list(log.to_records()) == ["D1,Aspirin,1", "D1,Metformin,0"]
    assert log.taken_count() == 1
    assert log.is_taken("Aspirin") is True
    assert log.is_taken("Unknown") is False


@pytest.mark.parametrize(
    "choice,label",
    [
        ("1", "Morning"),
        ("2", "Afternoon"),
        ("3", "Evening"),
        ("4", "Bedtime"),
        ("5", "As needed"),
        ("", "As needed"),
    ],
)
def test_time_of_day_from_choice(choice, label):
    assert TimeOfDay.from_choice(choice) == label
