"""Replay stored records into a registry and billing service, and back."""

import logging

from wardbook.billing import BillingService
from wardbook.exceptions import InvalidRateError
from wardbook.registry import HospitalRegistry
from wardbook.store.abc import RecordStore

_LOGGER = logging.getLogger(__name__)


def load_into(
    registry: HospitalRegistry,
    billing: BillingService,
    store: RecordStore,
    *,
    logger: logging.Logger | None = None,
) -> int:
    """Load patients and rates from the store.

    Each record is replayed on its own; a record the registry rejects (unknown
    ward, full ward, bad age) is logged and skipped.

    Returns:
        Number of patients restored.
    """
    logger = logger or _LOGGER
    restored = 0
    for record in store.load_patients():
        outcome = registry.restore_patient(record)
        if outcome.ok:
            restored += 1
        else:
            logger.warning(f"Skipping patient {record.patient_id}: {outcome.message}")
    logger.info(f"Total patients loaded: {restored}")

    for rate in store.load_rates():
        try:
            billing.set_ward_rate(rate.ward, rate.rate)
        except InvalidRateError as e:
            logger.warning(f"Skipping rate: {e}")
    return restored


def save_from(
    registry: HospitalRegistry, billing: BillingService, store: RecordStore
) -> None:
    """Persist every patient and the current rate table."""
    store.save_patients(registry.snapshot())
    store.save_rates(billing.rate_table())
