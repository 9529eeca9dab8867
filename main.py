"""Main entry point for medication tracker.

Usage:
    python main.py
    python main.py --patient Alice --data-dir data
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from medication_tracker.cli import MenuApp, prompt_patient_name
from medication_tracker.config import settings
from medication_tracker.data import StorageFormatError, TrackerStorage
from medication_tracker.services import MedicationTracker
from medication_tracker.utils import make_clock, setup_logger


def main(argv=None) -> int:
    """Main application entry point."""
    parser = argparse.ArgumentParser(description="Medication tracker for seniors")
    parser.add_argument("--patient", type=str, default=None, help="Patient name (prompted if omitted)")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory for patient files")
    args = parser.parse_args(argv)

    setup_logger(console_level=settings.log_level, logs_dir=settings.log_dir)
    logger.info("Starting Medication Tracker")
    logger.debug(f"Configuration: {settings!r}")

    print(f"\n{'=' * 50}\n")
    print(f"\n{' MEDICATION TRACKER FOR SENIORS ':=^50}")

    try:
        patient_name = args.patient or prompt_patient_name()
    except EOFError:
        logger.info("No patient name given, exiting")
        return 1

    storage = TrackerStorage(
        patient_name,
        data_dir=args.data_dir or settings.data_dir,
        strict=settings.strict_parsing,
    )
    try:
        tracker = MedicationTracker(
            patient_name,
            storage=storage,
            decrement_on_repeat=settings.decrement_on_repeat,
        )
    except StorageFormatError as e:
        logger.error(f"Failed to load data for {patient_name}: {e}")
        return 1

    clock = make_clock(settings.use_system_clock, settings.today, settings.week_start)
    MenuApp(tracker, clock, default_quantity=settings.default_quantity).run()

    logger.info("Medication Tracker stopped")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Received KeyboardInterrupt, exiting...")
