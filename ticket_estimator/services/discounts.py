from __future__ import annotations

from typing import Sequence

from ticket_estimator.models import DiscountCard, Passenger

COUPLE_REBATE = 0.2
HALF_COUPLE_REBATE = 0.1


def apply_group_discounts(
    total_fare: float, base_fare: float, passengers: Sequence[Passenger]
) -> float:
    """Couple and half-couple rebates on the group total.

    Both require an all-adult group; they cannot stack since one needs
    exactly two travellers and the other exactly one.
    """
    if any(p.is_minor for p in passengers):
        return total_fare

    if len(passengers) == 2 and any(p.holds(DiscountCard.COUPLE) for p in passengers):
        total_fare -= base_fare * COUPLE_REBATE * 2

    if len(passengers) == 1 and passengers[0].holds(DiscountCard.HALF_COUPLE):
        total_fare -= base_fare * HALF_COUPLE_REBATE

    return total_fare
