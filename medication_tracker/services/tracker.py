"""Medication tracker service: records, daily logs and adherence queries."""

from pathlib import Path
from typing import Optional

from loguru import logger

from medication_tracker.data.models import DailyLog, Medication, TodayStatus
from medication_tracker.data.storage import TrackerStorage
from medication_tracker.services.report import render_weekly_summary

# Marking a medication taken again on the same date uses another dose.
# Marking it missed never gives the dose back.
DECREMENT_ON_REPEAT = True


class TrackerError(Exception):
    """Base exception for tracker operations."""


class MedicationNotFoundError(TrackerError):
    """Medication name is not known to the tracker."""

    def __init__(self, name: str):
        super().__init__("Medication not found")
        self.name = name


class ReportWriteError(TrackerError):
    """Weekly report could not be written.

    The message is the underlying I/O error text.
    """


class MedicationTracker:
    """Owner of one patient's medications and daily logs.

    Handles all operations on the patient's data:
    - Adding and refilling medications
    - Marking medications as taken or missed for a date
    - Daily status, reminders and missed lists
    - Weekly adherence summaries and report files

    Every mutation rewrites the affected file(s) in full before returning.
    Dates are opaque labels supplied by the caller.
    """

    def __init__(
        self,
        patient_name: str,
        storage: Optional[TrackerStorage] = None,
        decrement_on_repeat: bool = DECREMENT_ON_REPEAT,
    ):
        """Initialize tracker and load persisted data.

        Args:
            patient_name: Patient display name
            storage: Storage to use (default: files in the current directory)
            decrement_on_repeat: Use a dose on every mark-taken call, even if
                the medication was already taken on that date
        """
        self.patient_name = patient_name
        self.storage = storage or TrackerStorage(patient_name)
        self.decrement_on_repeat = decrement_on_repeat

        self.medications: dict[str, Medication] = self.storage.load_medications()
        self.daily_logs: dict[str, DailyLog] = self.storage.load_logs()

        logger.info(
            f"Tracker ready for {patient_name}: "
            f"{len(self.medications)} medication(s), {len(self.daily_logs)} logged date(s)"
        )

    def _require(self, name: str) -> Medication:
        medication = self.medications.get(name)
        if medication is None:
            logger.warning(f"Medication not found for {self.patient_name}: {name!r}")
            raise MedicationNotFoundError(name)
        return medication

    def is_taken(self, name: str, date: str) -> bool:
        """Return the taken flag for a medication on a date (absent means False)."""
        log = self.daily_logs.get(date)
        return log is not None and log.is_taken(name)

    def get_medication(self, name: str) -> Optional[Medication]:
        return self.medications.get(name)

    def medication_names(self) -> list[str]:
        return list(self.medications)

    def add_medication(
        self,
        name: str,
        dosage: str,
        time_of_day: str,
        count: int,
    ) -> Medication:
        """Add medication, replacing any existing one with the same name.

        Args:
            name: Medication name
            dosage: Free-text dosage
            time_of_day: Schedule label
            count: Starting quantity (becomes both current and total)

        Returns:
            Created Medication instance
        """
        if name in self.medications:
            logger.warning(f"Overwriting existing medication for {self.patient_name}: {name}")

        medication = Medication(
            name=name,
            dosage=dosage,
            time_of_day=time_of_day,
            current_count=count,
            total_prescribed=count,
        )
        self.medications[name] = medication
        self.storage.save_medications(self.medications)

        logger.info(
            f"Added medication for {self.patient_name}: {name} "
            f"({medication.details}), {count} dose(s)"
        )
        return medication

    def mark_taken(self, med_name: str, date: str, taken: bool) -> None:
        """Record whether a medication was taken on a date.

        Taking uses one dose (never below zero). Marking missed leaves the
        count alone, even if the dose was taken earlier that date.

        Args:
            med_name: Medication name
            date: Date label
            taken: True for taken, False for missed

        Raises:
            MedicationNotFoundError: If the medication is unknown (nothing changes)
        """
        medication = self._require(med_name)

        log = self.daily_logs.get(date)
        if log is None:
            log = DailyLog(date=date)
            self.daily_logs[date] = log

        already_taken = log.is_taken(med_name)
        log.set_taken(med_name, taken)

        if taken and (self.decrement_on_repeat or not already_taken):
            medication.take_dose()

        self.storage.save_logs(self.daily_logs)
        self.storage.save_medications(self.medications)

        logger.info(
            f"Marked {med_name} as {'taken' if taken else 'missed'} on {date} "
            f"for {self.patient_name} ({medication.current_count} left)"
        )

    def refill_medication(self, name: str, amount: int) -> Medication:
        """Add doses to a medication's current and total counts.

        Raises:
            MedicationNotFoundError: If the medication is unknown (nothing changes)
        """
        medication = self._require(name)
        medication.refill(amount)
        self.storage.save_medications(self.medications)

        logger.info(
            f"Refilled {name} for {self.patient_name} by {amount}: "
            f"{medication.current_count} of {medication.total_prescribed}"
        )
        return medication

    def check_today_status(self, date: str) -> list[TodayStatus]:
        """Get status for every medication on a date.

        Returns:
            One TodayStatus per medication, sorted by details string.
            Medications sharing dosage and time of day keep dict order.
        """
        status = []
        for name, med in self.medications.items():
            taken = self.is_taken(name, date)
            reminder = "Taken" if taken else f"REMINDER: Take {name} at {med.time_of_day}"
            status.append(TodayStatus(name, med.details, taken, reminder))

        status.sort(key=lambda row: row.details)
        return status

    def get_missed_medications(self, date: str) -> list[str]:
        """Get "{name} at {time_of_day}" for medications not taken on a date."""
        return [
            f"{name} at {med.time_of_day}"
            for name, med in self.medications.items()
            if not self.is_taken(name, date)
        ]

    def list_medications(self) -> list[str]:
        return [med.display_line() for med in self.medications.values()]

    def generate_weekly_summary(self, week_start: str) -> str:
        return render_weekly_summary(self, week_start)

    def save_chart_to_file(self, week_start: str) -> Path:
        """Write the weekly summary to {patient}_weekly_report_{week_start}.txt.

        Returns:
            Path of the written report

        Raises:
            ReportWriteError: If the file cannot be created or written
        """
        summary = self.generate_weekly_summary(week_start)
        try:
            path = self.storage.write_report(week_start, summary)
        except OSError as e:
            logger.error(f"Failed to save weekly report for {self.patient_name}: {e}")
            raise ReportWriteError(str(e)) from e

        logger.info(f"Saved weekly report for {self.patient_name}: {path}")
        return path
