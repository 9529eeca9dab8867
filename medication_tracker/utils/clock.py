"""Date label providers for medication tracker.

The tracker treats dates as opaque strings. A clock only has to hand out
the same labels consistently for "today" and "this week".
"""

from datetime import date
from typing import Callable, Optional

from loguru import logger

DEFAULT_TODAY = "2024-W01-1"
DEFAULT_WEEK_START = "2024-W01"


class FixedClock:
    """Clock returning fixed labels (reference behavior, and for tests)."""

    def __init__(self, today: str = DEFAULT_TODAY, week_start: str = DEFAULT_WEEK_START):
        self._today = today
        self._week_start = week_start

    def today(self) -> str:
        return self._today

    def week_start(self) -> str:
        return self._week_start

    def __repr__(self) -> str:
        return f"FixedClock(today={self._today!r}, week_start={self._week_start!r})"


class SystemClock:
    """Clock derived from the local calendar date.

    today() is the ISO date ("2024-01-03"); week_start() is the ISO week
    ("2024-W01"). Weekly report keys built from week_start() are therefore
    separate from the daily keys returned by today().
    """

    def __init__(self, date_func: Optional[Callable[[], date]] = None):
        """Initialize clock.

        Args:
            date_func: Callable returning the current date (default: date.today)
        """
        self._date_func = date_func or date.today

    def today(self) -> str:
        return self._date_func().isoformat()

    def week_start(self) -> str:
        year, week, _ = self._date_func().isocalendar()
        return f"{year}-W{week:02d}"

    def __repr__(self) -> str:
        return "SystemClock()"


def make_clock(use_system_clock: bool, today: str, week_start: str):
    """Build the clock selected by configuration."""
    if use_system_clock:
        logger.debug("Using system clock for date labels")
        return SystemClock()
    logger.debug(f"Using fixed date labels: today={today}, week_start={week_start}")
    return FixedClock(today=today, week_start=week_start)
