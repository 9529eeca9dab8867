"""Flat-file storage for medication tracker."""

from pathlib import Path
from typing import Iterator, Union

from loguru import logger

from .models import FIELD_SEPARATOR, DailyLog, Medication


class StorageFormatError(ValueError):
    """Raised in strict mode when a persisted line cannot be parsed."""


class TrackerStorage:
    """Storage for one patient's medications and daily logs.

    Each patient has two comma-separated text files in data_dir:
    {patient}_meds.txt and {patient}_logs.txt. Files are rewritten in full
    on every save, using the temp-file-then-rename pattern.

    Fields are not escaped. A line whose field count is wrong is skipped
    (lossy by design) unless strict is set.
    """

    def __init__(
        self,
        patient_name: str,
        data_dir: Union[str, Path] = ".",
        strict: bool = False,
    ):
        """Initialize storage.

        Args:
            patient_name: Patient display name, used as the file prefix
            data_dir: Directory holding the patient's files
            strict: Raise StorageFormatError on malformed lines
        """
        self.patient_name = patient_name
        self.data_dir = Path(data_dir)
        self.strict = strict
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def meds_path(self) -> Path:
        return self.data_dir / f"{self.patient_name}_meds.txt"

    @property
    def logs_path(self) -> Path:
        return self.data_dir / f"{self.patient_name}_logs.txt"

    def report_path(self, week_start: str) -> Path:
        return self.data_dir / f"{self.patient_name}_weekly_report_{week_start}.txt"

    def _read_records(self, path: Path, expected_fields: int) -> Iterator[list[str]]:
        """Yield split records with the expected field count.

        Lines are decoded one at a time, so a line that is not valid UTF-8
        is skipped like any other malformed line.

        Raises:
            StorageFormatError: If strict and a line has the wrong field count
                or cannot be decoded
        """
        if not path.exists():
            logger.debug(f"Data file not found, starting empty: {path}")
            return

        with path.open("rb") as f:
            for line_no, raw_line in enumerate(f, start=1):
                try:
                    line = raw_line.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    if self.strict:
                        raise StorageFormatError(
                            f"{path.name}:{line_no}: not valid UTF-8"
                        ) from e
                    logger.warning(
                        f"Skipping undecodable line {line_no} in {path.name}: {e.reason}"
                    )
                    continue
                if not line:
                    continue
                fields = line.split(FIELD_SEPARATOR)
                if len(fields) != expected_fields:
                    if self.strict:
                        raise StorageFormatError(
                            f"{path.name}:{line_no}: expected {expected_fields} "
                            f"fields, got {len(fields)}"
                        )
                    logger.warning(
                        f"Skipping malformed line {line_no} in {path.name}: "
                        f"{len(fields)} field(s)"
                    )
                    continue
                yield fields

    def _write_lines(self, path: Path, lines: Iterator[str]) -> None:
        """Rewrite a file in full with atomic rename.

        Raises:
            OSError: If the file cannot be written (temp file is cleaned up)
        """
        temp_path = path.with_name(path.name + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
            temp_path.replace(path)
        except OSError as e:
            logger.opt(exception=True).error(
                f"Error writing {path}: {type(e).__name__}: {e}"
            )
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError as unlink_error:
                    logger.error(f"Failed to remove temp file {temp_path}: {unlink_error}")
            raise

    def load_medications(self) -> dict[str, Medication]:
        """Load medications keyed by name.

        Returns:
            Mapping of name to Medication (empty if the file doesn't exist)

        Raises:
            StorageFormatError: If strict and a line is malformed
        """
        medications = {}
        for fields in self._read_records(self.meds_path, Medication.RECORD_FIELDS):
            try:
                med = Medication.from_record(fields, strict=self.strict)
            except ValueError as e:
                raise StorageFormatError(f"{self.meds_path.name}: {e}") from e
            medications[med.name] = med

        logger.debug(f"Loaded {len(medications)} medication(s) for {self.patient_name}")
        return medications

    def load_logs(self) -> dict[str, DailyLog]:
        """Load daily logs keyed by date.

        Returns:
            Mapping of date to DailyLog (empty if the file doesn't exist)

        Raises:
            StorageFormatError: If strict and a line is malformed
        """
        logs: dict[str, DailyLog] = {}
        for date, med_name, flag in self._read_records(self.logs_path, DailyLog.RECORD_FIELDS):
            log = logs.setdefault(date, DailyLog(date=date))
            log.set_taken(med_name, flag == "1")

        logger.debug(f"Loaded logs for {len(logs)} date(s) for {self.patient_name}")
        return logs

    def save_medications(self, medications: dict[str, Medication]) -> None:
        self._write_lines(
            self.meds_path,
            (med.to_record() for med in medications.values()),
        )
        logger.debug(f"Saved {len(medications)} medication(s) to {self.meds_path}")

    def save_logs(self, logs: dict[str, DailyLog]) -> None:
        self._write_lines(
            self.logs_path,
            (record for log in logs.values() for record in log.to_records()),
        )
        logger.debug(f"Saved logs for {len(logs)} date(s) to {self.logs_path}")

    def write_report(self, week_start: str, text: str) -> Path:
        """Write a weekly report, overwriting any existing one.

        Returns:
            Path of the written report

        Raises:
            OSError: If the report cannot be created or written
        """
        path = self.report_path(week_start)
        path.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote weekly report: {path}")
        return path
