"""
Hospital registry: the admission and discharge coordinator.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from datetime import date

from wardbook.exceptions import (
    ConfigurationError,
    HospitalError,
    InvalidWardError,
    PatientNotFoundError,
)
from wardbook.settings import DEFAULT_WARD_CAPACITIES
from wardbook.types import (
    Outcome,
    Patient,
    PatientRecord,
    PatientStatus,
    Ward,
    WardOccupancy,
)

_LOGGER = logging.getLogger(__name__)


class HospitalRegistry:
    """Owns the hospital's wards and every patient ever admitted.

    The registry keeps patients and wards consistent: an admitted patient
    occupies exactly one bed, in the ward named by ``patient.ward``, and a
    discharged patient occupies none. Admission and discharge either fully
    succeed or leave wards and the patient list untouched.

    Mutating operations return an ``Outcome`` instead of raising for expected
    failures (unknown ward, full ward, unknown patient, repeat discharge).

    Example:
        >>> registry = HospitalRegistry({"ICU": 1})
        >>> registry.admit_patient("P001", "Asha Rao", 42, "ICU").ok
        True
        >>> registry.admit_patient("P002", "Ben Ode", 30, "ICU").message
        'ICU ward is full (1/1 beds occupied)'
    """

    def __init__(
        self,
        ward_capacities: Mapping[str, int] | None = None,
        *,
        clock: Callable[[], date] = date.today,
        logger: logging.Logger | None = None,
    ):
        """Create the wards.

        Args:
            ward_capacities: Ward name to number of beds. Defaults to ICU=5,
                General=10, Pediatric=8, Emergency=3.
            clock: Returns the current date; used for admission and discharge
                dates and for open stays.
            logger: Logger instance.

        Raises:
            ConfigurationError: If a ward has no beds.
        """
        capacities = (
            DEFAULT_WARD_CAPACITIES if ward_capacities is None else ward_capacities
        )
        self._clock = clock
        self._logger = logger or _LOGGER
        self._lock = threading.RLock()
        self._wards: dict[str, Ward] = {}
        self._patients: list[Patient] = []
        for name, total_beds in capacities.items():
            if total_beds <= 0:
                raise ConfigurationError(
                    f"Ward '{name}' must have at least one bed, got {total_beds}"
                )
            self._wards[name] = Ward(name=name, total_beds=total_beds)
        self._logger.debug("Hospital initialized with %d wards", len(self._wards))

    @property
    def wards(self) -> Mapping[str, Ward]:
        return self._wards

    @property
    def patients(self) -> tuple[Patient, ...]:
        """Every patient, in admission order."""
        return tuple(self._patients)

    def today(self) -> date:
        return self._clock()

    def get_patient(self, patient_id: str) -> Patient | None:
        """Find a patient by id. With duplicate ids the earliest record wins."""
        return next((p for p in self._patients if p.id == patient_id), None)

    def admit_patient(
        self,
        patient_id: str,
        name: str,
        age: int,
        ward_name: str,
        admit_date: date | None = None,
    ) -> Outcome[Patient]:
        """Admit a new patient into a ward.

        The ward is checked first, then the patient is built, then a bed is
        allocated; the patient is recorded only once all three succeed.

        Returns:
            Outcome carrying the new Patient, or one of InvalidWardError,
            InvalidPatientDataError, NoBedsAvailableError.
        """
        with self._lock:
            ward = self._wards.get(ward_name)
            if ward is None:
                return self._reject("admit", InvalidWardError(ward_name))
            try:
                patient = Patient.admit(
                    patient_id, name, age, ward_name, admit_date or self.today()
                )
                ward.add_patient(patient)
            except HospitalError as e:
                return self._reject("admit", e)
            self._record(patient)
            self._logger.info(f"Patient {patient.name} admitted to {ward_name}")
            return Outcome.success(patient)

    def discharge_patient(
        self, patient_id: str, on: date | None = None
    ) -> Outcome[Patient]:
        """Discharge a patient and release their bed.

        Returns:
            Outcome carrying the discharged Patient, or PatientNotFoundError,
            AlreadyDischargedError. The bed is released only after the
            patient's discharge succeeds.
        """
        with self._lock:
            patient = self.get_patient(patient_id)
            if patient is None:
                return self._reject("discharge", PatientNotFoundError(patient_id))
            try:
                patient.discharge(on or self.today())
            except HospitalError as e:
                return self._reject("discharge", e)
            self._wards[patient.ward].remove_patient(patient)
            self._logger.info(f"Patient {patient.name} discharged from {patient.ward}")
            return Outcome.success(patient)

    def restore_patient(self, record: PatientRecord) -> Outcome[Patient]:
        """Replay a persisted patient record.

        Admitted records must find a free bed in their ward. Discharged records
        never occupy a bed, so they bypass the capacity check. A discharged
        record with no discharge date is discharged today.
        """
        with self._lock:
            ward = self._wards.get(record.ward)
            if ward is None:
                return self._reject("restore", InvalidWardError(record.ward))
            try:
                patient = Patient.admit(
                    record.patient_id,
                    record.name,
                    record.age,
                    record.ward,
                    record.admit_date,
                )
                if record.status == PatientStatus.DISCHARGED:
                    patient.discharge(record.discharge_date or self.today())
                else:
                    ward.add_patient(patient)
            except HospitalError as e:
                return self._reject("restore", e)
            self._record(patient)
            return Outcome.success(patient)

    def admitted_patients(self) -> list[Patient]:
        return [p for p in self._patients if not p.is_discharged]

    def discharged_patients(self) -> list[Patient]:
        return [p for p in self._patients if p.is_discharged]

    def ward_occupancy(self) -> list[WardOccupancy]:
        """Bed usage per ward, in ward creation order."""
        return [ward.occupancy() for ward in self._wards.values()]

    def ward_allocations(self) -> dict[str, list[Patient]]:
        """Patients currently holding a bed, per ward."""
        return {name: list(ward.occupants) for name, ward in self._wards.items()}

    def snapshot(self) -> list[PatientRecord]:
        """Ordered records of every patient, for persistence."""
        return [patient.to_record() for patient in self._patients]

    def _record(self, patient: Patient) -> None:
        if self.get_patient(patient.id) is not None:
            self._logger.warning(
                f"Patient ID '{patient.id}' is already in use; "
                "discharge by id will find the earlier record"
            )
        self._patients.append(patient)

    def _reject(self, operation: str, error: HospitalError) -> Outcome[Patient]:
        self._logger.warning(f"Cannot {operation} patient: {error}")
        return Outcome.failure(error)
