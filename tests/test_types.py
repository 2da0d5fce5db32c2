"""Tests for the patient state machine and the ward bed pool."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from wardbook.exceptions import (
    AlreadyDischargedError,
    InvalidPatientDataError,
    NoBedsAvailableError,
    PatientNotFoundError,
)
from wardbook.types import (
    Outcome,
    Patient,
    PatientRecord,
    PatientStatus,
    Ward,
)

ADMIT_DAY = date(2026, 3, 1)


def make_patient(patient_id: str = "P001", ward: str = "ICU") -> Patient:
    return Patient.admit(patient_id, "Asha Rao", 42, ward, ADMIT_DAY)


class TestPatientAdmit:
    """Test cases for creating admitted patients."""

    def test_new_patient_is_admitted(self):
        """Test a new patient starts admitted with no discharge date."""
        patient = make_patient()
        assert patient.status == PatientStatus.ADMITTED
        assert patient.discharge_date is None
        assert not patient.is_discharged
        assert (patient.id, patient.name, patient.age) == ("P001", "Asha Rao", 42)

    def test_identity_is_embedded_person(self):
        """Test identity fields come from the embedded person."""
        patient = make_patient()
        assert patient.person.id == "P001"
        assert patient.person.age == 42

    @pytest.mark.parametrize("age", [0, 150])
    def test_age_bounds_are_inclusive(self, age):
        """Test ages 0 and 150 are accepted."""
        assert Patient.admit("P001", "Asha Rao", age, "ICU", ADMIT_DAY).age == age

    @pytest.mark.parametrize("age", [-1, 151, 200])
    def test_age_out_of_range_rejected(self, age):
        """Test ages outside 0..150 raise InvalidPatientDataError."""
        with pytest.raises(InvalidPatientDataError) as exc_info:
            Patient.admit("P001", "Asha Rao", age, "ICU", ADMIT_DAY)
        assert exc_info.value.field_name == "Age"
        assert exc_info.value.field_value == str(age)

    def test_blank_name_rejected(self):
        """Test a blank name is invalid patient data."""
        with pytest.raises(InvalidPatientDataError, match="'Name'"):
            Patient.admit("P001", "  ", 42, "ICU", ADMIT_DAY)

    def test_blank_id_rejected(self):
        """Test a blank id is invalid patient data."""
        with pytest.raises(InvalidPatientDataError, match="'PatientID'"):
            Patient.admit("", "Asha Rao", 42, "ICU", ADMIT_DAY)

    def test_multiline_name_rejected(self):
        """Test a name must fit on one line of the patients file."""
        with pytest.raises(InvalidPatientDataError, match="'Name'"):
            Patient.admit("P001", "Asha\nRao", 42, "ICU", ADMIT_DAY)


class TestPatientDischarge:
    """Test cases for the admitted to discharged transition."""

    def test_discharge_sets_date_and_status(self):
        """Test discharge records the date and changes status."""
        patient = make_patient()
        patient.discharge(ADMIT_DAY + timedelta(days=2))
        assert patient.is_discharged
        assert patient.discharge_date == date(2026, 3, 3)

    def test_discharge_twice_raises_and_keeps_date(self):
        """Test a second discharge raises and leaves the first date."""
        patient = make_patient()
        patient.discharge(ADMIT_DAY)
        with pytest.raises(AlreadyDischargedError) as exc_info:
            patient.discharge(ADMIT_DAY + timedelta(days=5))
        assert exc_info.value.patient_id == "P001"
        assert exc_info.value.patient_name == "Asha Rao"
        assert patient.discharge_date == ADMIT_DAY

    def test_discharge_before_admission_rejected(self):
        """Test a discharge date earlier than admission is refused."""
        patient = make_patient()
        with pytest.raises(InvalidPatientDataError, match="DischargeDate"):
            patient.discharge(ADMIT_DAY - timedelta(days=1))
        assert patient.status == PatientStatus.ADMITTED
        assert patient.discharge_date is None


class TestDaysAdmitted:
    """Test cases for inclusive day counting."""

    def test_same_day_counts_as_one(self):
        """Test a patient admitted today has been in for one day."""
        assert make_patient().days_admitted(today=ADMIT_DAY) == 1

    def test_discharged_three_days_later_counts_four(self):
        """Test admission on day D and discharge on D+3 is four days."""
        patient = make_patient()
        patient.discharge(ADMIT_DAY + timedelta(days=3))
        assert patient.days_admitted() == 4

    def test_discharge_date_overrides_today(self):
        """Test a discharged stay no longer grows with the calendar."""
        patient = make_patient()
        patient.discharge(ADMIT_DAY + timedelta(days=1))
        assert patient.days_admitted(today=ADMIT_DAY + timedelta(days=30)) == 2

    def test_open_stay_runs_to_today(self):
        """Test an admitted patient's stay ends on the given day."""
        assert make_patient().days_admitted(today=ADMIT_DAY + timedelta(days=9)) == 10


class TestWard:
    """Test cases for the ward bed pool."""

    def test_add_until_full(self):
        """Test beds are allocated until capacity is reached."""
        ward = Ward(name="Emergency", total_beds=3)
        for i in range(3):
            ward.add_patient(make_patient(f"P00{i}", "Emergency"))
        assert ward.occupied_beds == 3
        assert ward.available_beds == 0
        assert ward.is_full

    def test_full_ward_raises_without_mutation(self):
        """Test admitting into a full ward raises and leaves occupants alone."""
        ward = Ward(name="ICU", total_beds=1)
        first = make_patient("P001")
        ward.add_patient(first)
        with pytest.raises(NoBedsAvailableError) as exc_info:
            ward.add_patient(make_patient("P002"))
        error = exc_info.value
        assert (error.ward_name, error.total_beds, error.occupied_beds) == ("ICU", 1, 1)
        assert error.available_beds == 0
        assert ward.occupants == [first]

    def test_remove_releases_bed(self):
        """Test removing an occupant frees their bed."""
        ward = Ward(name="ICU", total_beds=5)
        patient = make_patient()
        ward.add_patient(patient)
        assert ward.remove_patient(patient) is True
        assert ward.occupied_beds == 0

    def test_remove_absent_patient_is_noop(self):
        """Test removing a patient without a bed changes nothing."""
        ward = Ward(name="ICU", total_beds=5)
        ward.add_patient(make_patient("P001"))
        assert ward.remove_patient(make_patient("P002")) is False
        assert ward.occupied_beds == 1

    def test_remove_matches_identity_not_equality(self):
        """Test two equal patient records are told apart on removal."""
        ward = Ward(name="ICU", total_beds=5)
        first, second = make_patient(), make_patient()
        assert first == second
        ward.add_patient(first)
        ward.add_patient(second)
        ward.remove_patient(second)
        assert len(ward.occupants) == 1
        assert ward.occupants[0] is first

    def test_occupancy_percentage(self):
        """Test occupancy is reported as a real percentage."""
        ward = Ward(name="Pediatric", total_beds=8)
        ward.add_patient(make_patient("P001", "Pediatric"))
        ward.add_patient(make_patient("P002", "Pediatric"))
        assert ward.occupancy_percentage == 25.0
        occupancy = ward.occupancy()
        assert occupancy.occupancy_percentage == 25.0
        assert occupancy.available_beds == 6
        assert occupancy.occupant_ids == ["P001", "P002"]

    @pytest.mark.parametrize("total_beds", [0, -2])
    def test_ward_needs_beds(self, total_beds):
        """Test a ward cannot be created without beds."""
        with pytest.raises(ValidationError):
            Ward(name="ICU", total_beds=total_beds)


class TestPatientRecord:
    """Test cases for persisted patient rows."""

    def test_parses_row_values(self):
        """Test text values are parsed and status is case-insensitive."""
        record = PatientRecord.model_validate(
            {
                "PatientID": "P001",
                "Name": "Asha Rao",
                "Age": "42",
                "Ward": "ICU",
                "AdmitDate": "2026-03-01",
                "Status": "Discharged",
                "DischargeDate": "",
            }
        )
        assert record.age == 42
        assert record.admit_date == ADMIT_DAY
        assert record.status == PatientStatus.DISCHARGED
        assert record.discharge_date is None

    def test_unknown_status_rejected(self):
        """Test a status other than admitted/discharged is invalid."""
        with pytest.raises(ValidationError):
            PatientRecord.model_validate(
                {
                    "PatientID": "P001",
                    "Name": "Asha Rao",
                    "Age": "42",
                    "Ward": "ICU",
                    "AdmitDate": "2026-03-01",
                    "Status": "transferred",
                }
            )

    def test_patient_to_row(self):
        """Test a discharged patient becomes a full seven-column row."""
        patient = make_patient()
        patient.discharge(date(2026, 3, 4))
        assert patient.to_record().to_row() == [
            "P001",
            "Asha Rao",
            "42",
            "ICU",
            "2026-03-01",
            "discharged",
            "2026-03-04",
        ]

    def test_admitted_row_with_discharge_date_rejected(self):
        """Test an admitted row cannot carry a discharge date."""
        with pytest.raises(ValidationError, match="DischargeDate is set"):
            PatientRecord.model_validate(
                {
                    "PatientID": "P001",
                    "Name": "Asha Rao",
                    "Age": "42",
                    "Ward": "ICU",
                    "AdmitDate": "2026-03-01",
                    "Status": "admitted",
                    "DischargeDate": "2026-03-04",
                }
            )


class TestOutcome:
    """Test cases for operation outcomes."""

    def test_success(self):
        outcome = Outcome.success(3)
        assert outcome.ok
        assert outcome.message == ""
        assert outcome.unwrap() == 3

    def test_failure_unwrap_raises_carried_error(self):
        outcome = Outcome.failure(PatientNotFoundError("P999"))
        assert not outcome.ok
        assert outcome.value is None
        assert "P999" in outcome.message
        with pytest.raises(PatientNotFoundError):
            outcome.unwrap()
