"""
Pytest configuration and shared fixtures for the body fit analyzer tests.
"""

import pytest

from bodyfit.fit.schema import MeasurementSet
from bodyfit.fit.store import InMemoryMeasurementStore


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def form_values() -> dict:
    """Raw form input as the user would type it."""
    return {
        "height": "170",
        "weight": "65",
        "chest": "90",
        "waist": "70",
        "hips": "95",
        "shoulders": "40",
    }


@pytest.fixture
def make_measurements():
    """Factory for measurement sets; only chest/waist/hips matter for classification."""
    def _make(chest: float = 90.0, waist: float = 70.0, hips: float = 95.0, **overrides) -> MeasurementSet:
        values = {
            "height": 170.0,
            "weight": 65.0,
            "chest": chest,
            "waist": waist,
            "hips": hips,
            "shoulders": 40.0,
        }
        values.update(overrides)
        return MeasurementSet(**values)
    return _make


@pytest.fixture
def hourglass_measurements(make_measurements) -> MeasurementSet:
    return make_measurements(chest=90, waist=70, hips=95)


@pytest.fixture
def memory_store() -> InMemoryMeasurementStore:
    return InMemoryMeasurementStore()
