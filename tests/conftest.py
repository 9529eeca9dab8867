"""Shared fixtures for tests."""

import tempfile
from pathlib import Path

import pytest
from loguru import logger

from medication_tracker.data.storage import TrackerStorage
from medication_tracker.services.tracker import MedicationTracker
from medication_tracker.utils.clock import FixedClock

PATIENT_NAME = "alice"


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data.

    Yields:
        Path: Path to temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage(temp_data_dir):
    """Create TrackerStorage for the test patient in the temp directory.

    Returns:
        TrackerStorage: Storage instance for testing
    """
    return TrackerStorage(PATIENT_NAME, data_dir=temp_data_dir)


@pytest.fixture
def tracker(storage):
    """Create an empty MedicationTracker backed by the temp directory.

    Returns:
        MedicationTracker: Tracker instance for testing
    """
    return MedicationTracker(PATIENT_NAME, storage=storage)


@pytest.fixture
def reload_tracker(temp_data_dir):
    """Factory that builds a fresh tracker from the files on disk.

    Returns:
        Callable returning a new MedicationTracker
    """
    def _reload(**kwargs):
        return MedicationTracker(
            PATIENT_NAME,
            storage=TrackerStorage(PATIENT_NAME, data_dir=temp_data_dir),
            **kwargs,
        )
    return _reload


@pytest.fixture
def fixed_clock():
    """Clock returning the reference date labels.

    Returns:
        FixedClock: today "2024-W01-1", week start "2024-W01"
    """
    return FixedClock()


@pytest.fixture
def log_messages():
    """Capture loguru messages at WARNING and above.

    Yields:
        list[str]: Captured messages
    """
    messages = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)


class ScriptedIO:
    """Feeds scripted input lines and records output lines."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def scripted_io():
    """Factory for ScriptedIO instances.

    Returns:
        Callable taking input lines and returning ScriptedIO
    """
    return ScriptedIO
