"""
Flat-file record store: CSV patients, ``ward=rate`` config and a text report.
"""

import csv
import logging
from collections.abc import Iterator, Sequence
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from wardbook.exceptions import RecordFileError
from wardbook.settings import Settings
from wardbook.store.abc import RecordStore
from wardbook.types import (
    PATIENT_HEADERS,
    BillingReport,
    Patient,
    PatientRecord,
    RateRecord,
)

_LOGGER = logging.getLogger(__name__)

# AdmitDate and Status are required; DischargeDate is optional.
_REQUIRED_COLUMNS = 6


def _format_rate(rate: float) -> str:
    return str(int(rate)) if rate.is_integer() else str(rate)


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    location = ".".join(str(part) for part in detail["loc"])
    if not location:
        return detail["msg"]
    return f"{location}: {detail['msg']}"


class FlatFileStore(RecordStore):
    """Stores records as flat delimited text files in one directory.

    Files:
        - patients file: CSV with header
          ``PatientID,Name,Age,Ward,AdmitDate,Status,DischargeDate``.
          Six-column files without DischargeDate are read as well.
        - rates file: one ``Ward=rate`` per line, ``#`` starts a comment.
        - report file: plain text billing report.

    A missing patients or rates file loads as empty. A bad line is logged
    with its line number and skipped.
    """

    def __init__(
        self,
        data_dir: Path | str = ".",
        *,
        patients_file: str = "patients.csv",
        rates_file: str = "rates.cfg",
        report_file: str = "billing_report.txt",
        logger: logging.Logger | None = None,
    ):
        self._data_dir = Path(data_dir)
        self.patients_path = self._data_dir / patients_file
        self.rates_path = self._data_dir / rates_file
        self.report_path = self._data_dir / report_file
        self._logger = logger or _LOGGER

    @classmethod
    def from_settings(cls, settings: Settings) -> "FlatFileStore":
        return cls(
            settings.data_dir,
            patients_file=settings.patients_file,
            rates_file=settings.rates_file,
            report_file=settings.report_file,
        )

    def _lines(
        self, path: Path, *, comments: bool = False
    ) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, text)`` for each non-blank line of ``path``.

        Lines that are not valid UTF-8 are logged and skipped. With
        ``comments``, lines starting with ``#`` are dropped before decoding.
        """
        with path.open("rb") as f:
            for line_number, raw in enumerate(f, start=1):
                raw = raw.strip()
                if not raw or (comments and raw.startswith(b"#")):
                    continue
                try:
                    yield line_number, raw.decode("utf-8")
                except UnicodeDecodeError:
                    self._logger.warning(
                        f"{path.name} line {line_number}: not valid UTF-8, skipping"
                    )

    def load_patients(self) -> list[PatientRecord]:
        name = self.patients_path.name
        records: list[PatientRecord] = []
        try:
            lines = self._lines(self.patients_path)
            if next(lines, None) is None:
                self._logger.info(f"{name} is empty, starting with no patients")
                return records
            for line_number, text in lines:
                try:
                    row = next(csv.reader([text]))
                except csv.Error as e:
                    self._logger.warning(f"{name} line {line_number}: {e}, skipping")
                    continue
                if len(row) < _REQUIRED_COLUMNS:
                    self._logger.warning(
                        f"{name} line {line_number}: invalid format, skipping"
                    )
                    continue
                values = dict(zip(PATIENT_HEADERS, (cell.strip() for cell in row)))
                try:
                    records.append(PatientRecord.model_validate(values))
                except ValidationError as e:
                    self._logger.warning(
                        f"{name} line {line_number}: {_first_error(e)}, skipping"
                    )
        except FileNotFoundError:
            self._logger.info(f"{name} not found, starting with no patients")
        except OSError as e:
            raise RecordFileError(name, "read") from e
        return records

    def save_patients(self, records: Sequence[PatientRecord]) -> None:
        name = self.patients_path.name
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with self.patients_path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                writer.writerow(PATIENT_HEADERS)
                writer.writerows(record.to_row() for record in records)
        except OSError as e:
            raise RecordFileError(name, "write") from e
        self._logger.debug(f"Saved {len(records)} patients to {name}")

    def load_rates(self) -> list[RateRecord]:
        name = self.rates_path.name
        records: list[RateRecord] = []
        try:
            for line_number, line in self._lines(self.rates_path, comments=True):
                parts = line.split("=")
                if len(parts) != 2:
                    self._logger.warning(
                        f"{name} line {line_number}: invalid format, skipping"
                    )
                    continue
                try:
                    records.append(
                        RateRecord.model_validate(
                            {"ward": parts[0].strip(), "rate": parts[1].strip()}
                        )
                    )
                except ValidationError as e:
                    self._logger.warning(
                        f"{name} line {line_number}: {_first_error(e)}, skipping"
                    )
        except FileNotFoundError:
            self._logger.info(f"{name} not found, using default rates")
        except OSError as e:
            raise RecordFileError(name, "read") from e
        return records

    def save_rates(self, records: Sequence[RateRecord]) -> None:
        name = self.rates_path.name
        lines = ["# Hospital Ward Rates Configuration"]
        lines.extend(f"{r.ward}={_format_rate(r.rate)}" for r in records)
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self.rates_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise RecordFileError(name, "write") from e

    def save_report(
        self,
        report: BillingReport,
        patients: Sequence[Patient],
        today: date | None = None,
    ) -> Path:
        lines = ["HOSPITAL BILLING REPORT", "=" * 50, ""]
        for patient in patients:
            lines.append(f"Patient: {patient.name} (ID: {patient.id})")
            days = patient.days_admitted(today)
            lines.append(f"Ward: {patient.ward} | Days: {days}")
            lines.append(f"Status: {patient.status.value}")
            lines.append("")
        lines.append(f"BILLS (discount {report.discount_percentage}%)")
        lines.append("-" * 50)
        for bill in report.bills:
            lines.append(
                f"{bill.patient_name:<20} | Ward: {bill.ward:<15} | "
                f"Days: {bill.days_admitted} | Bill: {bill.final_bill:.2f}"
            )
        lines.append("-" * 50)
        lines.append(f"Grand total: {report.grand_total:.2f}")
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self.report_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise RecordFileError(self.report_path.name, "write") from e
        return self.report_path
