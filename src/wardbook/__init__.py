"""Wardbook - ward beds, admissions, discharges and billing for a hospital.

A hospital has a fixed set of wards, each a pool of beds. Admitting a patient
takes a bed in a named ward; discharging them gives it back and fixes the
length of their stay. Discharged patients are billed at their ward's daily
rate, less a hospital-wide discount.

The registry keeps patients and wards consistent: a patient is either
admitted and holding exactly one bed, or discharged and holding none. Every
admission or discharge either fully succeeds or changes nothing.

Core:
    - HospitalRegistry: Owns wards and patients; admits and discharges
    - BillingService: Daily rates, discount and bills for discharged patients
    - Patient, Ward: The admission state machine and the bed pool

Storage:
    - FlatFileStore: CSV patients, ``ward=rate`` config, text billing report

Example:
    >>> from wardbook import BillingService, HospitalRegistry
    >>>
    >>> registry = HospitalRegistry()
    >>> registry.admit_patient("P001", "Asha Rao", 42, "ICU").ok
    True
    >>> patient = registry.discharge_patient("P001").unwrap()
    >>> bill = BillingService().calculate_bill(patient).unwrap()
    >>> bill.final_bill
    5000.0
"""

from wardbook.billing import BillingService
from wardbook.exceptions import (
    AlreadyDischargedError,
    ConfigurationError,
    HospitalError,
    InvalidPatientDataError,
    InvalidRateError,
    InvalidWardError,
    NoBedsAvailableError,
    PatientNotDischargedError,
    PatientNotFoundError,
    RecordFileError,
    WardbookError,
)
from wardbook.hospital import Hospital
from wardbook.registry import HospitalRegistry
from wardbook.store import FlatFileStore, RecordStore
from wardbook.types import (
    Bill,
    BillingReport,
    Outcome,
    Patient,
    PatientRecord,
    PatientStatus,
    Person,
    RateRecord,
    Ward,
    WardOccupancy,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "HospitalRegistry",
    "BillingService",
    "Hospital",
    # Patient and ward types
    "Person",
    "Patient",
    "PatientStatus",
    "Ward",
    "WardOccupancy",
    # Billing types
    "Bill",
    "BillingReport",
    # Records
    "PatientRecord",
    "RateRecord",
    "Outcome",
    # Storage
    "RecordStore",
    "FlatFileStore",
    # Exceptions
    "WardbookError",
    "ConfigurationError",
    "RecordFileError",
    "HospitalError",
    "InvalidWardError",
    "InvalidPatientDataError",
    "NoBedsAvailableError",
    "PatientNotFoundError",
    "AlreadyDischargedError",
    "PatientNotDischargedError",
    "InvalidRateError",
]
