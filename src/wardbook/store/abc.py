from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from wardbook.types import BillingReport, Patient, PatientRecord, RateRecord


class RecordStore(ABC):
    """Abstract base class for Wardbook record stores.

    A record store moves patient and rate records between the registry and
    some durable form. It knows nothing about beds or billing rules; the
    registry and billing service replay what it loads.

    Subclasses must implement:
        - load_patients: Read every patient record that can be parsed
        - save_patients: Replace the stored patients with the given records
        - load_rates: Read every ward rate that can be parsed
        - save_rates: Replace the stored rates with the given records
        - save_report: Write a human-readable billing report
    """

    @abstractmethod
    def load_patients(self) -> list[PatientRecord]:
        """Load patient records in stored order.

        A store with nothing saved yet returns an empty list. Records that
        cannot be parsed are skipped, never fatal to the whole load.

        Raises:
            RecordFileError: If the underlying storage cannot be read.
        """
        ...

    @abstractmethod
    def save_patients(self, records: Sequence[PatientRecord]) -> None:
        """Persist patient records, replacing whatever was stored.

        Raises:
            RecordFileError: If the underlying storage cannot be written.
        """
        ...

    @abstractmethod
    def load_rates(self) -> list[RateRecord]:
        """Load ward daily rates. Unparsable entries are skipped.

        Raises:
            RecordFileError: If the underlying storage cannot be read.
        """
        ...

    @abstractmethod
    def save_rates(self, records: Sequence[RateRecord]) -> None:
        """Persist the ward rate table.

        Raises:
            RecordFileError: If the underlying storage cannot be written.
        """
        ...

    @abstractmethod
    def save_report(
        self,
        report: BillingReport,
        patients: Sequence[Patient],
        today: date | None = None,
    ) -> Path:
        """Write the billing report and return where it went.

        ``today`` is the date stays of still-admitted patients are counted to.

        Raises:
            RecordFileError: If the report cannot be written.
        """
        ...
