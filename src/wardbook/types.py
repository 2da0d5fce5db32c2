"""Wardbook type definitions for patients, wards and bills."""

import logging
from datetime import date
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from wardbook.exceptions import (
    AlreadyDischargedError,
    InvalidPatientDataError,
    NoBedsAvailableError,
    WardbookError,
)

_LOGGER = logging.getLogger(__name__)

MIN_AGE = 0
MAX_AGE = 150

T = TypeVar("T")


def _spans_lines(value: str) -> bool:
    # Each stored patient is one line of the patients file.
    return len(value.strip().splitlines()) > 1


class Model(BaseModel):
    """Base model for all Wardbook types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatientStatus(Enum):
    """Admission status of a patient."""

    ADMITTED = "admitted"
    DISCHARGED = "discharged"


class Person(Model):
    """Identity of a person known to the hospital."""

    model_config = ConfigDict(frozen=True)

    id: str
    """ Unique identifier, e.g. "P001".
    """
    name: str
    """ Full name. For human-readable display.
    """
    age: int
    """ Age in years, 0 to 150 inclusive.
    """


class Patient(Model):
    """A person admitted to a ward, with their admission lifecycle.

    A patient starts ADMITTED and moves to DISCHARGED exactly once; DISCHARGED
    is terminal. A returning person is a new Patient record.
    """

    person: Person
    ward: str
    """ Name of the ward the patient was admitted to.
    """
    admit_date: date
    discharge_date: date | None = None
    """ Set by discharge() and only by discharge().
    """
    status: PatientStatus = PatientStatus.ADMITTED

    @classmethod
    def admit(
        cls, patient_id: str, name: str, age: int, ward: str, admit_date: date
    ) -> "Patient":
        """Create a newly admitted patient.

        Raises:
            InvalidPatientDataError: If the id or name is blank or spans lines,
                or the age is outside 0 to 150.
        """
        if not patient_id or not patient_id.strip() or _spans_lines(patient_id):
            raise InvalidPatientDataError("PatientID", patient_id)
        if not name or not name.strip() or _spans_lines(name):
            raise InvalidPatientDataError("Name", name)
        if age < MIN_AGE or age > MAX_AGE:
            raise InvalidPatientDataError("Age", str(age))
        return cls(
            person=Person(id=patient_id.strip(), name=name.strip(), age=age),
            ward=ward,
            admit_date=admit_date,
        )

    @property
    def id(self) -> str:
        return self.person.id

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def age(self) -> int:
        return self.person.age

    @property
    def is_discharged(self) -> bool:
        """Check if the patient has been discharged."""
        return self.status == PatientStatus.DISCHARGED

    def discharge(self, on: date) -> None:
        """Discharge the patient on the given date.

        Raises:
            AlreadyDischargedError: If the patient was already discharged.
            InvalidPatientDataError: If the date precedes the admission date.
        """
        if self.is_discharged:
            raise AlreadyDischargedError(self.id, self.name)
        if on < self.admit_date:
            raise InvalidPatientDataError("DischargeDate", on.isoformat())
        self.discharge_date = on
        self.status = PatientStatus.DISCHARGED

    def days_admitted(self, today: date | None = None) -> int:
        """Inclusive count of calendar days in hospital.

        The stay ends on the discharge date, or on ``today`` (default: the
        current date) while the patient is still admitted. A same-day stay
        counts as one day.
        """
        end = self.discharge_date or today or date.today()
        return (end - self.admit_date).days + 1

    def to_record(self) -> "PatientRecord":
        return PatientRecord(
            patient_id=self.id,
            name=self.name,
            age=self.age,
            ward=self.ward,
            admit_date=self.admit_date,
            status=self.status,
            discharge_date=self.discharge_date,
        )


class WardOccupancy(Model):
    """Point-in-time view of a ward's beds."""

    name: str
    total_beds: int
    occupied_beds: int
    occupant_ids: list[str] = Field(default_factory=list)

    @property
    def available_beds(self) -> int:
        return self.total_beds - self.occupied_beds

    @property
    def occupancy_percentage(self) -> float:
        return self.occupied_beds * 100.0 / self.total_beds


class Ward(Model):
    """A named pool of beds holding the patients currently admitted to it."""

    name: str
    total_beds: int = Field(gt=0)
    """ Capacity, fixed when the ward is created.
    """
    occupants: list[Patient] = Field(default_factory=list)
    """ Currently admitted patients, in order of bed allocation.
    """

    @property
    def occupied_beds(self) -> int:
        return len(self.occupants)

    @property
    def available_beds(self) -> int:
        return self.total_beds - len(self.occupants)

    @property
    def occupancy_percentage(self) -> float:
        return len(self.occupants) * 100.0 / self.total_beds

    @property
    def is_full(self) -> bool:
        return len(self.occupants) >= self.total_beds

    def add_patient(self, patient: Patient) -> None:
        """Allocate a bed to the patient.

        Raises:
            NoBedsAvailableError: If every bed is occupied.
        """
        if self.is_full:
            raise NoBedsAvailableError(self.name, self.total_beds, self.occupied_beds)
        self.occupants.append(patient)
        _LOGGER.debug("Bed allocated in %s ward to %s", self.name, patient.id)

    def remove_patient(self, patient: Patient) -> bool:
        """Release the patient's bed. Returns False if they held no bed here."""
        for index, occupant in enumerate(self.occupants):
            if occupant is patient:
                del self.occupants[index]
                _LOGGER.debug("Bed released in %s ward by %s", self.name, patient.id)
                return True
        _LOGGER.debug("Patient %s holds no bed in %s ward", patient.id, self.name)
        return False

    def occupancy(self) -> WardOccupancy:
        return WardOccupancy(
            name=self.name,
            total_beds=self.total_beds,
            occupied_beds=self.occupied_beds,
            occupant_ids=[patient.id for patient in self.occupants],
        )


class Bill(Model):
    """Billing statement for one discharged patient."""

    patient_id: str
    patient_name: str
    ward: str
    daily_rate: float
    days_admitted: int
    total_bill: float
    discount_percentage: float
    discount: float
    final_bill: float


class BillingReport(Model):
    """Bills for every discharged patient, in admission order."""

    bills: list[Bill] = Field(default_factory=list)
    discount_percentage: float = 0.0

    @property
    def grand_total(self) -> float:
        """Sum of the final bills."""
        return sum(bill.final_bill for bill in self.bills)


PATIENT_HEADERS = (
    "PatientID",
    "Name",
    "Age",
    "Ward",
    "AdmitDate",
    "Status",
    "DischargeDate",
)
"""Column order of the patients file. DischargeDate may be absent in older files."""


class PatientRecord(Model):
    """One persisted patient row."""

    model_config = ConfigDict(str_strip_whitespace=True)

    patient_id: str = Field(alias="PatientID", min_length=1)
    name: str = Field(alias="Name", min_length=1)
    age: int = Field(alias="Age")
    ward: str = Field(alias="Ward")
    admit_date: date = Field(alias="AdmitDate")
    status: PatientStatus = Field(alias="Status")
    discharge_date: date | None = Field(default=None, alias="DischargeDate")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("discharge_date", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _discharge_date_needs_discharged(self) -> "PatientRecord":
        # Discharged rows may lack a date; older files have no such column.
        if self.status == PatientStatus.ADMITTED and self.discharge_date is not None:
            raise ValueError("DischargeDate is set but Status is admitted")
        return self

    def to_row(self) -> list[str]:
        data = self.model_dump(by_alias=True, mode="json")
        return ["" if data[key] is None else str(data[key]) for key in PATIENT_HEADERS]


class RateRecord(Model):
    """One persisted ``ward=rate`` pair."""

    ward: str = Field(min_length=1)
    rate: float = Field(ge=0, allow_inf_nan=False)


class Outcome(Model, Generic[T]):
    """Result of a registry or billing operation.

    Expected failures (full ward, unknown patient, ...) are returned rather
    than raised. ``error`` carries the typed exception; ``unwrap()`` raises it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T | None = None
    error: WardbookError | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: WardbookError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Get the failure reason, or an empty string on success."""
        return str(self.error) if self.error else ""

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
