"""Per-passenger fare rules.

Each passenger is priced independently from the base fare:

  1. Family card with a namesake in the group  -> base * 0.7, final.
  2. Flat fares: staff 1, under one 0, under four 9, final.
  3. Age bracket: minors 0.6, 70+ 0.8 (Senior card -0.2), others 1.2,
     then adjusted by how far ahead the trip is booked.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

from ticket_estimator.errors import InvalidInput
from ticket_estimator.models import DiscountCard, Passenger
from ticket_estimator.utils.clock import add_local_days, local_now, to_local

LAST_MINUTE_WINDOW = timedelta(hours=6)
EARLY_BOOKING_DAYS = 30
ADVANCE_BOOKING_DAYS = 5

FAMILY_RATE = 0.7
MINOR_RATE = 0.6
ELDERLY_RATE = 0.8
SENIOR_CARD_REBATE = 0.2
ADULT_RATE = 1.2

LAST_MINUTE_RATE = 0.8
EARLY_BOOKING_REBATE = 0.2

STAFF_FARE = 1.0
INFANT_FARE = 0.0
TODDLER_FARE = 9.0


def price_for(
    base_fare: float,
    passengers: Sequence[Passenger],
    travel_date: datetime,
    now: datetime | None = None,
) -> float:
    """Sum of individual fares for ``passengers`` travelling on ``travel_date``."""
    now = to_local(now) if now is not None else local_now()
    travel_date = to_local(travel_date)

    total = 0.0
    for passenger in passengers:
        total += passenger_fare(base_fare, passenger, passengers, travel_date, now)
    return total


def passenger_fare(
    base_fare: float,
    passenger: Passenger,
    group: Sequence[Passenger],
    travel_date: datetime,
    now: datetime,
) -> float:
    if passenger.age < 0:
        raise InvalidInput("Age is invalid")

    if _has_family_discount(passenger, group):
        return base_fare * FAMILY_RATE

    flat = _flat_fare(passenger)
    if flat is not None:
        return flat

    fare = _bracket_fare(base_fare, passenger)
    return _adjust_for_booking_time(fare, base_fare, travel_date, now)


def _has_family_discount(passenger: Passenger, group: Sequence[Passenger]) -> bool:
    if not passenger.holds(DiscountCard.FAMILY) or not passenger.last_name.strip():
        return False
    namesakes = sum(1 for p in group if p.last_name == passenger.last_name)
    return namesakes > 1


def _flat_fare(passenger: Passenger) -> float | None:
    if passenger.holds(DiscountCard.STAFF):
        return STAFF_FARE
    if passenger.age < 1:
        return INFANT_FARE
    if passenger.age < 4:
        return TODDLER_FARE
    return None


def _bracket_fare(base_fare: float, passenger: Passenger) -> float:
    if passenger.age <= 17:
        return base_fare * MINOR_RATE
    if passenger.age >= 70:
        fare = base_fare * ELDERLY_RATE
        if passenger.holds(DiscountCard.SENIOR):
            fare -= base_fare * SENIOR_CARD_REBATE
        return fare
    return base_fare * ADULT_RATE


def _adjust_for_booking_time(
    fare: float, base_fare: float, travel_date: datetime, now: datetime
) -> float:
    if travel_date - now <= LAST_MINUTE_WINDOW:
        return fare * LAST_MINUTE_RATE
    if travel_date >= add_local_days(now, EARLY_BOOKING_DAYS):
        return fare - base_fare * EARLY_BOOKING_REBATE
    advance_limit = add_local_days(now, ADVANCE_BOOKING_DAYS)
    if travel_date > advance_limit:
        diff_days = math.ceil(abs(travel_date - advance_limit) / timedelta(days=1))
        return fare + (20 - diff_days) * 0.02 * base_fare
    return fare + base_fare
