"""
Ward-rate billing for discharged patients.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from wardbook.exceptions import (
    InvalidRateError,
    PatientNotDischargedError,
    PatientNotFoundError,
)
from wardbook.registry import HospitalRegistry
from wardbook.settings import DEFAULT_WARD_RATES
from wardbook.types import Bill, BillingReport, Outcome, Patient, RateRecord

_LOGGER = logging.getLogger(__name__)


class BillingService:
    """Computes bills from per-ward daily rates and a discount.

    The service holds no patient data; it reads patients handed to it.
    Wards without a rate bill at 0.
    """

    def __init__(
        self,
        rates: Mapping[str, float] | None = None,
        *,
        discount_percentage: float = 0.0,
        logger: logging.Logger | None = None,
    ):
        self._logger = logger or _LOGGER
        self._rates: dict[str, float] = {}
        self._discount_percentage = discount_percentage
        for ward_name, rate in (
            DEFAULT_WARD_RATES if rates is None else rates
        ).items():
            self.set_ward_rate(ward_name, rate)

    @property
    def discount_percentage(self) -> float:
        return self._discount_percentage

    def set_ward_rate(self, ward_name: str, rate: float) -> None:
        """Set the daily rate for a ward.

        Raises:
            InvalidRateError: If the rate is negative or not a number.
        """
        if not rate >= 0:
            raise InvalidRateError(ward_name, rate)
        self._rates[ward_name] = float(rate)

    def apply_discount(self, percentage: float) -> None:
        """Set the discount applied to every bill. The range is not checked."""
        self._discount_percentage = percentage
        self._logger.info(f"Discount applied: {percentage}%")

    def rate_for(self, ward_name: str) -> float:
        return self._rates.get(ward_name, 0.0)

    def rate_table(self) -> list[RateRecord]:
        return [
            RateRecord(ward=ward_name, rate=rate)
            for ward_name, rate in self._rates.items()
        ]

    def calculate_bill(
        self, patient: Patient, today: date | None = None
    ) -> Outcome[Bill]:
        """Bill a discharged patient.

        A patient who is still admitted gets no bill: the outcome carries a
        PatientNotDischargedError and nothing is changed.
        """
        if not patient.is_discharged:
            error = PatientNotDischargedError(patient.id, patient.name)
            self._logger.warning(str(error))
            return Outcome.failure(error)

        daily_rate = self.rate_for(patient.ward)
        days = patient.days_admitted(today)
        total_bill = daily_rate * days
        discount = total_bill * (self._discount_percentage / 100.0)
        return Outcome.success(
            Bill(
                patient_id=patient.id,
                patient_name=patient.name,
                ward=patient.ward,
                daily_rate=daily_rate,
                days_admitted=days,
                total_bill=total_bill,
                discount_percentage=self._discount_percentage,
                discount=discount,
                final_bill=total_bill - discount,
            )
        )

    def generate_report(self, patients: Iterable[Patient]) -> BillingReport:
        """Bill every discharged patient, keeping the given order."""
        bills = [
            self.calculate_bill(patient).unwrap()
            for patient in patients
            if patient.is_discharged
        ]
        return BillingReport(
            bills=bills, discount_percentage=self._discount_percentage
        )

    def bill_for(self, registry: HospitalRegistry, patient_id: str) -> Outcome[Bill]:
        """Bill a single patient looked up by id."""
        patient = registry.get_patient(patient_id)
        if patient is None:
            return Outcome.failure(PatientNotFoundError(patient_id))
        return self.calculate_bill(patient)
