"""Error handling utilities for medication tracker."""

from typing import Optional

from loguru import logger


def format_error_for_user(error: Exception) -> str:
    """Convert an exception to the text shown in the menu.

    Args:
        error: Exception to format

    Returns:
        User-facing error message
    """
    # Lazy import to avoid circular dependency
    from medication_tracker.data.storage import StorageFormatError
    from medication_tracker.services.tracker import (
        MedicationNotFoundError,
        ReportWriteError,
        TrackerError,
    )

    if isinstance(error, MedicationNotFoundError):
        return "Medication not found"

    if isinstance(error, ReportWriteError):
        return str(error)

    if isinstance(error, TrackerError):
        return str(error) or "Operation failed"

    if isinstance(error, StorageFormatError):
        return f"Data file is damaged: {error}"

    return "An internal error occurred. Please try again."


def log_operation(
    operation_name: str,
    patient: Optional[str] = None,
    medication: Optional[str] = None,
    **extra_context,
) -> None:
    """Log an operation with structured context.

    Args:
        operation_name: Name of the operation being performed
        patient: Patient name (if applicable)
        medication: Medication name (if applicable)
        **extra_context: Additional context to include in log
    """
    context = {"operation": operation_name}

    if patient is not None:
        context["patient"] = patient

    if medication is not None:
        context["medication"] = medication

    context.update(extra_context)

    logger.bind(**context).info(f"Operation: {operation_name}")


__all__ = [
    "format_error_for_user",
    "log_operation",
]
