"""
The hospital as the command line and console see it: registry, billing and
record store opened together from settings.
"""

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from wardbook.billing import BillingService
from wardbook.registry import HospitalRegistry
from wardbook.settings import SETTINGS, Settings
from wardbook.store import FlatFileStore, RecordStore, load_into, save_from
from wardbook.types import BillingReport

_LOGGER = logging.getLogger(__name__)


class Hospital:
    """Registry, billing service and store wired together.

    The registry is passed to the billing service explicitly; nothing here is
    module-level state.
    """

    def __init__(
        self,
        registry: HospitalRegistry,
        billing: BillingService,
        store: RecordStore,
    ):
        self.registry = registry
        self.billing = billing
        self.store = store

    @classmethod
    def open(
        cls,
        settings: Settings = SETTINGS,
        *,
        clock: Callable[[], date] = date.today,
        store: RecordStore | None = None,
    ) -> "Hospital":
        """Build the hospital from settings and load stored records.

        Raises:
            ConfigurationError: If a configured ward has no beds.
            RecordFileError: If a data file exists but cannot be read.
        """
        registry = HospitalRegistry(settings.ward_capacities, clock=clock)
        billing = BillingService(
            settings.ward_rates, discount_percentage=settings.discount_percentage
        )
        store = store or FlatFileStore.from_settings(settings)
        hospital = cls(registry, billing, store)
        load_into(registry, billing, store)
        _LOGGER.debug("Hospital opened with %d patients", len(registry.patients))
        return hospital

    def save(self) -> None:
        """Write patients and rates back to the store."""
        save_from(self.registry, self.billing, self.store)

    def billing_report(self) -> BillingReport:
        return self.billing.generate_report(self.registry.patients)

    def save_report(self) -> Path:
        """Generate the billing report and write it to the store."""
        return self.store.save_report(
            self.billing_report(), self.registry.patients, self.registry.today()
        )
