"""Shared fixtures: a fixed reference instant and clean module-level state."""

from __future__ import annotations

from datetime import datetime

import pytest

from ticket_estimator.models import DiscountCard, Passenger, TripRequest
from ticket_estimator.utils import cache, clock
from ticket_estimator.utils.clock import to_local

BASE_FARE = 100.0

# Mid-June keeps every offset used by the tests clear of a DST switch.
NOW = to_local(datetime(2026, 6, 10, 12, 0))


@pytest.fixture(autouse=True)
def _reset_state():
    clock.configure_timezone("Europe/Paris")
    cache.configure_cache(600)
    yield
    clock.configure_timezone("Europe/Paris")
    cache.invalidate_all()


@pytest.fixture
def now() -> datetime:
    return NOW


def passenger(age: float, *cards: DiscountCard, last_name: str = "Mehaye") -> Passenger:
    return Passenger(age=age, last_name=last_name, discounts=frozenset(cards))


def trip(*passengers: Passenger, origin: str = "Bordeaux", destination: str = "Paris",
         when: datetime | None = None) -> TripRequest:
    return TripRequest.of(origin, destination, when or NOW, passengers)
