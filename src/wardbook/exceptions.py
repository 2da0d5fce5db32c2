"""Wardbook exception hierarchy."""

from __future__ import annotations


class WardbookError(Exception):
    """Base exception for all Wardbook errors."""

    pass


class ConfigurationError(WardbookError):
    """Raised when there is a configuration error.

    Examples:
        - Ward configured with zero or negative beds
        - Unreadable data directory
    """

    pass


class RecordFileError(WardbookError):
    """Raised when a record file cannot be read or written.

    A missing file on load is not an error; it means "start empty".

    Attributes:
        file_name: Name of the file that failed
        operation: The operation that failed ("read" or "write")
    """

    def __init__(self, file_name: str, operation: str):
        self.file_name = file_name
        self.operation = operation
        super().__init__(f"Failed to {operation} file '{file_name}'")


class HospitalError(WardbookError):
    """Base exception for recoverable admission, discharge and billing errors."""

    pass


class InvalidWardError(HospitalError):
    """Raised when a ward name does not exist in the hospital."""

    def __init__(self, ward_name: str):
        self.ward_name = ward_name
        super().__init__(f"Ward '{ward_name}' does not exist in the hospital")


class InvalidPatientDataError(HospitalError):
    """Raised when a patient field has an invalid value.

    Attributes:
        field_name: The offending field, e.g. "Age"
        field_value: The rejected value, as text
    """

    def __init__(self, field_name: str, field_value: str):
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"Field '{field_name}' has invalid value: '{field_value}'")


class NoBedsAvailableError(HospitalError):
    """Raised when admitting into a ward whose beds are all occupied."""

    def __init__(self, ward_name: str, total_beds: int, occupied_beds: int):
        self.ward_name = ward_name
        self.total_beds = total_beds
        self.occupied_beds = occupied_beds
        super().__init__(
            f"{ward_name} ward is full ({occupied_beds}/{total_beds} beds occupied)"
        )

    @property
    def available_beds(self) -> int:
        return self.total_beds - self.occupied_beds


class PatientNotFoundError(HospitalError):
    """Raised when no patient with the given id exists."""

    def __init__(self, patient_id: str):
        self.patient_id = patient_id
        super().__init__(f"Patient ID '{patient_id}' does not exist in the system")


class AlreadyDischargedError(HospitalError):
    """Raised when discharging a patient a second time."""

    def __init__(self, patient_id: str, patient_name: str):
        self.patient_id = patient_id
        self.patient_name = patient_name
        super().__init__(
            f"Patient '{patient_name}' (ID: {patient_id}) is already discharged"
        )


class PatientNotDischargedError(HospitalError):
    """Reported when billing a patient who is still admitted."""

    def __init__(self, patient_id: str, patient_name: str):
        self.patient_id = patient_id
        self.patient_name = patient_name
        super().__init__(
            f"Patient '{patient_name}' (ID: {patient_id}) is still admitted; "
            "cannot generate bill"
        )


class InvalidRateError(HospitalError):
    """Raised when a ward daily rate is negative or not a number."""

    def __init__(self, ward_name: str, rate: float):
        self.ward_name = ward_name
        self.rate = rate
        super().__init__(
            f"Daily rate for '{ward_name}' must be a non-negative number: {rate}"
        )
