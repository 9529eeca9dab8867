"""Data models for medication tracker."""

import re
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional


FIELD_SEPARATOR = ","

MAX_COUNT = 2**32 - 1
_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


class TimeOfDay:
    """Schedule labels offered when adding a medication.

    Stored as free text, so records loaded from disk may carry any label.
    """

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    BEDTIME = "Bedtime"
    AS_NEEDED = "As needed"

    CHOICES = {
        "1": MORNING,
        "2": AFTERNOON,
        "3": EVENING,
        "4": BEDTIME,
    }

    @classmethod
    def from_choice(cls, choice: str) -> str:
        """Map a menu choice ("1".."4") to a label, anything else is "As needed"."""
        return cls.CHOICES.get(choice.strip(), cls.AS_NEEDED)


def parse_unsigned_count(text: str) -> Optional[int]:
    """Parse an unsigned 32-bit count, or return None.

    Accepts ASCII digits with an optional leading "+". Negative values,
    other characters and values above MAX_COUNT are rejected.

    Examples:
        >>> parse_unsigned_count("+5")
        5
        >>> parse_unsigned_count("4294967296") is None
        True
    """
    text = text.strip()
    if not _UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_COUNT:
        return None
    return value


def parse_count(value: str, strict: bool = False) -> int:
    """Parse a persisted dose count.

    Values parse_unsigned_count rejects become 0 (lossy by design) unless strict.

    Raises:
        ValueError: If strict and the value is not an unsigned integer
    """
    count = parse_unsigned_count(value)
    if count is not None:
        return count
    if strict:
        raise ValueError(f"Invalid dose count: {value!r}")
    return 0


@dataclass
class Medication:
    """Medication record.

    Attributes:
        name: Unique medication name (key)
        dosage: Free-text dosage (e.g., "1 pill", "5ml")
        time_of_day: Schedule label (see TimeOfDay)
        current_count: Doses remaining, never below 0
        total_prescribed: Doses prescribed so far, grows on refill
    """

    name: str
    dosage: str
    time_of_day: str
    current_count: int = 0
    total_prescribed: int = 0

    RECORD_FIELDS = 5

    @property
    def details(self) -> str:
        return f"{self.dosage} ({self.time_of_day})"

    def display_line(self) -> str:
        return (
            f"{self.name} - {self.dosage} at {self.time_of_day} "
            f"({self.current_count} left)"
        )

    def take_dose(self) -> None:
        """Use one dose, floored at zero."""
        if self.current_count > 0:
            self.current_count -= 1

    def refill(self, amount: int) -> None:
        self.current_count += amount
        self.total_prescribed += amount

    def to_record(self) -> str:
        """Convert medication to a comma-separated record (no escaping)."""
        return FIELD_SEPARATOR.join([
            self.name,
            self.dosage,
            self.time_of_day,
            str(self.current_count),
            str(self.total_prescribed),
        ])

    @classmethod
    def from_record(cls, fields: list[str], strict: bool = False) -> "Medication":
        """Create medication from split record fields.

        Args:
            fields: Exactly five fields
            strict: Reject unparsable counts instead of coercing them to 0

        Returns:
            Medication instance

        Raises:
            ValueError: If the field count is wrong, or strict and a count is invalid
        """
        if len(fields) != cls.RECORD_FIELDS:
            raise ValueError(
                f"Expected {cls.RECORD_FIELDS} fields, got {len(fields)}"
            )
        name, dosage, time_of_day, current, total = fields
        return cls(
            name=name,
            dosage=dosage,
            time_of_day=time_of_day,
            current_count=parse_count(current, strict),
            total_prescribed=parse_count(total, strict),
        )


@dataclass
class DailyLog:
    """Per-date record of which medications were taken.

    Attributes:
        date: Opaque date label (not parsed as a calendar date)
        taken: Mapping of medication name to taken flag
    """

    date: str
    taken: dict[str, bool] = field(default_factory=dict)

    RECORD_FIELDS = 3

    def is_taken(self, med_name: str) -> bool:
        return self.taken.get(med_name, False)

    def set_taken(self, med_name: str, taken: bool) -> None:
        self.taken[med_name] = taken

    def taken_count(self) -> int:
        return sum(1 for flag in self.taken.values() if flag)

    def to_records(self) -> Iterator[str]:
        """Yield one `date,name,1|0` record per medication entry."""
        for med_name, flag in self.taken.items():
            yield FIELD_SEPARATOR.join([self.date, med_name, "1" if flag else "0"])


class TodayStatus(NamedTuple):
    """One row of the daily status view."""

    name: str
    details: str
    taken: bool
    reminder: str
