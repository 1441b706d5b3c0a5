import os
import sys

import pytest

# Ensure project root is on sys.path so `import vacation_finder` works in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from vacation_finder.obs.metrics import reset_metrics  # noqa: E402
from vacation_finder.types import FlightRecord  # noqa: E402


def flight(origin, destination, price, availability, date):
    return FlightRecord(
        origin=origin,
        destination=destination,
        price=price,
        availability=availability,
        date=date,
    )


@pytest.fixture
def scenario_flights():
    """EZE -> BRC and back, ten days apart."""
    return [
        flight("EZE", "BRC", 300, 3, "2024-01-05"),
        flight("BRC", "EZE", 250, 4, "2024-01-15"),
    ]


@pytest.fixture
def mixed_flights():
    return [
        flight("EZE", "BRC", 300, 3, "2024-01-05"),
        flight("BRC", "EZE", 250, 4, "2024-01-15"),
        flight("EZE", "MDZ", 180, 1, "2024-03-10"),
        flight("MDZ", "EZE", 170, 2, "2024-03-16"),
        flight("EZE", "IGR", 220, 5, "2024-07-02"),
        flight("IGR", "EZE", 210, 6, "2024-07-09"),
        flight("EZE", "COR", 120, 8, "2024-11-20"),
        flight("COR", "EZE", 110, 1, "2024-11-18"),
    ]


@pytest.fixture(autouse=True)
def _clean_metrics():
    reset_metrics()
    yield
    reset_metrics()
