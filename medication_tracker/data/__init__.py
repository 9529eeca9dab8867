"""Data layer for medication tracker.

This module provides data models and flat-file storage for patient data.
"""

from .models import DailyLog, Medication, TimeOfDay, TodayStatus
from .storage import StorageFormatError, TrackerStorage

__all__ = [
    "Medication",
    "DailyLog",
    "TimeOfDay",
    "TodayStatus",
    "TrackerStorage",
    "StorageFormatError",
]
