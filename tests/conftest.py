"""Shared fixtures for fare calculator tests."""

import pytest

from train_fare.application import FareCalculationService, FareSettings, TableDistanceLookup
from train_fare.domain.models import DistanceTable

FARE_ENV_VARS = (
    "BASE_FARE",
    "INCREMENT_RATE",
    "VIP_DISCOUNT",
    "MAX_PROMPT_ATTEMPTS",
    "LOG_LEVEL",
    "CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def clean_fare_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the developer's shell out of the tests."""
    for name in FARE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def small_table() -> DistanceTable:
    """Three-station table used throughout the tests."""
    return DistanceTable.from_pairs([("1s", 1.8), ("2s", 1.2), ("3s", 1.2)])


@pytest.fixture
def lookup(small_table: DistanceTable) -> TableDistanceLookup:
    return TableDistanceLookup(small_table)


@pytest.fixture
def service(lookup: TableDistanceLookup) -> FareCalculationService:
    return FareCalculationService(
        lookup, FareSettings(base_fare=3.0, increment_rate=0.5, vip_discount=0.8)
    )
