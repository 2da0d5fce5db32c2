"""Shared fixtures for Wardbook tests."""

from datetime import date

import pytest

from wardbook.billing import BillingService
from wardbook.registry import HospitalRegistry
from wardbook.store import FlatFileStore

TODAY = date(2026, 3, 10)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def registry() -> HospitalRegistry:
    """Default wards (ICU=5, General=10, Pediatric=8, Emergency=3) on a fixed date."""
    return HospitalRegistry(clock=lambda: TODAY)


@pytest.fixture
def billing() -> BillingService:
    return BillingService()


@pytest.fixture
def store(tmp_path) -> FlatFileStore:
    return FlatFileStore(tmp_path)
