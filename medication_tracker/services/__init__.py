"""Tracker services: data operations and weekly reports."""

from .report import adherence_percentage, day_keys, render_weekly_summary
from .tracker import (
    DECREMENT_ON_REPEAT,
    MedicationNotFoundError,
    MedicationTracker,
    ReportWriteError,
    TrackerError,
)

__all__ = [
    "MedicationTracker",
    "TrackerError",
    "MedicationNotFoundError",
    "ReportWriteError",
    "DECREMENT_ON_REPEAT",
    "render_weekly_summary",
    "day_keys",
    "adherence_percentage",
]
