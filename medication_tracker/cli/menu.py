"""Interactive text menu for medication tracker."""

from typing import Callable, Optional

from loguru import logger

from medication_tracker.data.models import TimeOfDay, parse_unsigned_count
from medication_tracker.services.tracker import MedicationTracker, TrackerError
from medication_tracker.utils.error_handler import format_error_for_user, log_operation

LINE_WIDTH = 50

MENU_OPTIONS = (
    "View Today's Medications",
    "Mark Medication as Taken",
    "Mark Medication as Missed",
    "View All Medications",
    "Add New Medication",
    "Refill Medication",
    "View Weekly Summary",
    "Save Weekly Report to File",
    "Exit",
)
EXIT_CHOICE = str(len(MENU_OPTIONS))


def parse_unsigned(text: str, default: Optional[int] = None) -> Optional[int]:
    """Parse user input as an unsigned 32-bit integer, or return default."""
    value = parse_unsigned_count(text)
    return default if value is None else value


def prompt_patient_name(input_func: Optional[Callable[[str], str]] = None) -> str:
    return (input_func or input)("Enter patient name: ").strip()


class MenuApp:
    """Menu loop driving a MedicationTracker.

    Each selection calls exactly one tracker operation and prints the
    result or the error text.
    """

    def __init__(
        self,
        tracker: MedicationTracker,
        clock,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        default_quantity: int = 30,
    ):
        """Initialize menu.

        Args:
            tracker: Tracker to operate on
            clock: Provider of today() and week_start() labels
            input_func: Reads one line given a prompt (default: input)
            output_func: Writes one line (default: print)
            default_quantity: Starting quantity when input is not a number
        """
        self.tracker = tracker
        self.clock = clock
        self.input = input_func or (lambda prompt: input(prompt))
        self.output = output_func or (lambda text: print(text))
        self.default_quantity = default_quantity

        self.handlers = {
            "1": self.show_today,
            "2": lambda: self.mark_selected(taken=True),
            "3": lambda: self.mark_selected(taken=False),
            "4": self.show_all,
            "5": self.add_medication,
            "6": self.refill_medication,
            "7": self.show_weekly_summary,
            "8": self.save_weekly_report,
        }

    def separator(self) -> None:
        self.output(f"\n{'=' * LINE_WIDTH}\n")

    def header(self, text: str) -> None:
        self.output(f"\n{text:=^{LINE_WIDTH}}")

    def wait_for_enter(self) -> None:
        self.input("\nPress ENTER to continue...")

    def show_reminders(self, today: str) -> None:
        """Print today's pending reminders above the menu."""
        missed = self.tracker.get_missed_medications(today)

        self.output(f"TODAY: {today}")
        self.output("-" * LINE_WIDTH)
        if missed:
            self.output("REMINDERS - Please take:")
            for reminder in missed:
                self.output(f"   * {reminder}")
        elif self.tracker.medications:
            self.output("All medications taken today!")
        else:
            self.output("No medications scheduled.")
        self.output("-" * LINE_WIDTH)

    def show_menu(self) -> str:
        self.output("MENU:")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.output(f"{number}. {label}")
        self.output("-" * LINE_WIDTH)
        return self.input(f"Choice (1-{EXIT_CHOICE}): ").strip()

    def run(self) -> None:
        """Loop until Exit is chosen or input ends."""
        logger.info(f"Menu started for {self.tracker.patient_name}")
        while True:
            self.separator()
            self.header(f" Hello, {self.tracker.patient_name} ")
            self.show_reminders(self.clock.today())

            try:
                choice = self.show_menu()
            except EOFError:
                logger.info("Input closed, leaving menu")
                break

            if choice == EXIT_CHOICE:
                self.separator()
                self.output("Goodbye!")
                break

            handler = self.handlers.get(choice)
            if handler is None:
                self.output("Invalid choice.")
            else:
                log_operation("menu_selection", patient=self.tracker.patient_name, choice=choice)
                self.separator()
                handler()

            try:
                self.wait_for_enter()
            except EOFError:
                break

        logger.info(f"Menu closed for {self.tracker.patient_name}")

    def select_medication(self, empty_message: str) -> Optional[str]:
        """Show numbered medication names and read a selection.

        Returns:
            Selected name, or None if nothing valid was chosen
        """
        names = self.tracker.medication_names()
        if not names:
            self.output(empty_message)
            return None

        for number, name in enumerate(names, start=1):
            self.output(f"{number}. {name}")

        number = parse_unsigned(self.input("Enter number: "))
        if number is None:
            return None
        if not 1 <= number <= len(names):
            self.output("Invalid selection.")
            return None
        return names[number - 1]

    def show_today(self) -> None:
        self.header(" TODAY'S MEDICATIONS ")
        status = self.tracker.check_today_status(self.clock.today())
        if not status:
            self.output("No medications scheduled.")
            return

        for row in status:
            self.output(row.name)
            self.output(f"   Status: {'[X] TAKEN' if row.taken else '[ ] NOT TAKEN'}")
            self.output(f"   Details: {row.details}")
            if not row.taken:
                self.output(f"   *** {row.reminder}")
            self.output("")

    def mark_selected(self, taken: bool) -> None:
        self.header(" MARK AS TAKEN " if taken else " MARK AS MISSED ")
        name = self.select_medication("No medications to mark.")
        if name is None:
            return

        try:
            self.tracker.mark_taken(name, self.clock.today(), taken)
        except TrackerError as e:
            self.output(f"Error: {format_error_for_user(e)}")
            return
        self.output(f"Recorded: {name} {'taken' if taken else 'missed'}")

    def show_all(self) -> None:
        self.header(" ALL MEDICATIONS ")
        lines = self.tracker.list_medications()
        if not lines:
            self.output("No medications on record.")
            return
        for line in lines:
            self.output(f"* {line}")

    def add_medication(self) -> None:
        self.header(" ADD NEW MEDICATION ")
        name = self.input("Medication name: ").strip()
        dosage = self.input("Dosage (e.g., '1 pill', '5ml'): ").strip()

        self.output("Time of day:")
        for choice, label in TimeOfDay.CHOICES.items():
            self.output(f"{choice}. {label}")
        time_of_day = TimeOfDay.from_choice(self.input(f"Select (1-{len(TimeOfDay.CHOICES)}): "))

        count = parse_unsigned(self.input("Starting quantity: "), self.default_quantity)

        self.tracker.add_medication(name, dosage, time_of_day, count)
        self.output("Medication added!")

    def refill_medication(self) -> None:
        self.header(" REFILL MEDICATION ")
        name = self.select_medication("No medications to refill.")
        if name is None:
            return

        amount = parse_unsigned(self.input("Amount to add: "), 0)
        try:
            self.tracker.refill_medication(name, amount)
        except TrackerError as e:
            self.output(f"Error: {format_error_for_user(e)}")
            return
        self.output(f"{name} refilled!")

    def show_weekly_summary(self) -> None:
        self.header(" WEEKLY SUMMARY ")
        self.output(self.tracker.generate_weekly_summary(self.clock.week_start()))

    def save_weekly_report(self) -> None:
        self.header(" SAVE WEEKLY REPORT ")
        try:
            path = self.tracker.save_chart_to_file(self.clock.week_start())
        except TrackerError as e:
            self.output(f"Error: {format_error_for_user(e)}")
            return
        self.output(f"Report saved to: {path}")
