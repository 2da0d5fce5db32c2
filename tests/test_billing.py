"""Tests for BillingService."""

from datetime import date, timedelta

import pytest

from wardbook.billing import BillingService
from wardbook.exceptions import (
    InvalidRateError,
    PatientNotDischargedError,
    PatientNotFoundError,
)
from wardbook.types import Patient

ADMIT_DAY = date(2026, 3, 1)


def discharged(
    patient_id: str, ward: str = "ICU", days: int = 4, name: str = "Asha Rao"
) -> Patient:
    patient = Patient.admit(patient_id, name, 42, ward, ADMIT_DAY)
    patient.discharge(ADMIT_DAY + timedelta(days=days - 1))
    return patient


class TestRates:
    """Test cases for the ward rate table."""

    def test_default_rates(self, billing):
        assert billing.rate_for("ICU") == 5000.0
        assert billing.rate_for("General") == 2000.0
        assert billing.rate_for("Pediatric") == 2500.0
        assert billing.rate_for("Emergency") == 8000.0

    def test_unknown_ward_rate_is_zero(self, billing):
        assert billing.rate_for("Burns") == 0.0

    def test_set_ward_rate(self, billing):
        billing.set_ward_rate("ICU", 6000)
        billing.set_ward_rate("Burns", 7500.5)
        assert billing.rate_for("ICU") == 6000.0
        assert [(r.ward, r.rate) for r in billing.rate_table()][-1] == ("Burns", 7500.5)

    def test_negative_rate_rejected(self, billing):
        with pytest.raises(InvalidRateError):
            billing.set_ward_rate("ICU", -1)
        assert billing.rate_for("ICU") == 5000.0

    def test_nan_rate_rejected(self, billing):
        """Test a rate that is not a number never reaches a bill."""
        with pytest.raises(InvalidRateError):
            billing.set_ward_rate("ICU", float("nan"))
        assert billing.rate_for("ICU") == 5000.0


class TestCalculateBill:
    """Test cases for single-patient bills."""

    def test_icu_four_days_with_ten_percent_discount(self, billing):
        """Test 4 ICU days at 5000 with 10% off comes to 18000."""
        billing.apply_discount(10)
        bill = billing.calculate_bill(discharged("P001")).unwrap()
        assert bill.daily_rate == 5000.0
        assert bill.days_admitted == 4
        assert bill.total_bill == 20000.0
        assert bill.discount == 2000.0
        assert bill.final_bill == 18000.0
        assert bill.discount_percentage == 10

    def test_admitted_patient_gets_no_bill(self, billing):
        """Test billing a patient still in hospital reports instead of raising."""
        patient = Patient.admit("P001", "Asha Rao", 42, "ICU", ADMIT_DAY)
        outcome = billing.calculate_bill(patient)
        assert not outcome.ok
        assert outcome.value is None
        assert isinstance(outcome.error, PatientNotDischargedError)
        assert not patient.is_discharged

    def test_unknown_ward_bills_zero(self, billing):
        bill = billing.calculate_bill(discharged("P001", ward="Burns")).unwrap()
        assert bill.daily_rate == 0.0
        assert bill.final_bill == 0.0

    def test_discount_is_not_range_checked(self, billing):
        """Test the core accepts any discount; the command surface validates."""
        billing.apply_discount(150)
        bill = billing.calculate_bill(discharged("P001", days=1)).unwrap()
        assert bill.final_bill == -2500.0

    def test_bill_for_unknown_patient(self, billing, registry):
        outcome = billing.bill_for(registry, "P999")
        assert isinstance(outcome.error, PatientNotFoundError)

    def test_bill_for_registry_patient(self, billing, registry):
        registry.admit_patient("P001", "Asha Rao", 42, "General")
        registry.discharge_patient("P001")
        bill = billing.bill_for(registry, "P001").unwrap()
        assert bill.final_bill == 2000.0


class TestGenerateReport:
    """Test cases for the all-patients billing report."""

    def test_only_discharged_in_given_order(self, billing):
        billing.apply_discount(50)
        still_admitted = Patient.admit("P002", "Ben Ode", 30, "ICU", ADMIT_DAY)
        patients = [
            discharged("P003", "General", days=2, name="Chen Li"),
            still_admitted,
            discharged("P001", "Emergency", days=1),
        ]
        report = billing.generate_report(patients)
        assert [b.patient_id for b in report.bills] == ["P003", "P001"]
        assert [b.final_bill for b in report.bills] == [2000.0, 4000.0]
        assert report.grand_total == 6000.0
        assert report.discount_percentage == 50

    def test_empty_report(self, billing):
        report = billing.generate_report([])
        assert report.bills == []
        assert report.grand_total == 0
