"""Weekly adherence summary rendering."""

from typing import Iterator

from loguru import logger

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAYS_IN_WEEK = len(DAY_NAMES)

SEPARATOR_WIDTH = 42


def day_keys(week_start: str) -> Iterator[tuple[str, str]]:
    """Yield (day name, date key) for each day of the week.

    Date keys are "{week_start}-{index}" with index 0..6. This is a literal
    suffix, not calendar arithmetic.

    Examples:
        >>> list(day_keys("2024-W01"))[:2]
        [('Mon', '2024-W01-0'), ('Tue', '2024-W01-1')]
    """
    for index, day in enumerate(DAY_NAMES):
        yield day, f"{week_start}-{index}"


def adherence_percentage(taken_days: int, days: int = DAYS_IN_WEEK) -> float:
    return taken_days / days * 100.0


def render_weekly_summary(tracker, week_start: str) -> str:
    """Render the weekly summary report for a tracker.

    Format:
        ========== WEEKLY SUMMARY FOR Alice ==========
        Week starting: 2024-W01

        MEDICATION: Aspirin (1 pill)
        Daily Record: Mon [X] Tue [ ] Wed [ ] Thu [ ] Fri [ ] Sat [ ] Sun [ ]
        Adherence: 1/7 days (14.3%)
        Remaining: 29 of 30 doses

        DAILY OVERVIEW:
        Mon: 1/1 medications taken
        Tue: 0/1 medications taken - MISSED: Aspirin at Morning
        ...

    The daily overview counts every true flag logged for that date.

    Args:
        tracker: MedicationTracker to summarize
        week_start: Week-start label used to build the seven date keys

    Returns:
        Report text
    """
    days = list(day_keys(week_start))
    parts = [
        f"\n========== WEEKLY SUMMARY FOR {tracker.patient_name} ==========\n",
        f"Week starting: {week_start}\n\n",
    ]

    for name, med in tracker.medications.items():
        parts.append(f"MEDICATION: {name} ({med.dosage})\n")
        parts.append("Daily Record: ")

        taken_days = 0
        for day, date in days:
            taken = tracker.is_taken(name, date)
            parts.append(f"{day} {'[X]' if taken else '[ ]'} ")
            if taken:
                taken_days += 1

        percentage = adherence_percentage(taken_days)
        parts.append(f"\nAdherence: {taken_days}/{DAYS_IN_WEEK} days ({percentage:.1f}%)\n")
        parts.append(
            f"Remaining: {med.current_count} of {med.total_prescribed} doses\n\n"
        )

    parts.append("DAILY OVERVIEW:\n")
    total_meds = len(tracker.medications)
    for day, date in days:
        log = tracker.daily_logs.get(date)
        taken_meds = log.taken_count() if log is not None else 0

        line = f"{day}: {taken_meds}/{total_meds} medications taken"
        if taken_meds < total_meds:
            missed = tracker.get_missed_medications(date)
            if missed:
                line += f" - MISSED: {', '.join(missed)}"
        parts.append(line + "\n")

    parts.append("\n" + "=" * SEPARATOR_WIDTH + "\n")

    logger.debug(
        f"Rendered weekly summary for {tracker.patient_name}, week {week_start}: "
        f"{total_meds} medication(s)"
    )
    return "".join(parts)
