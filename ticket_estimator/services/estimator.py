from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ticket_estimator.errors import EstimationFailed
from ticket_estimator.models import TripRequest
from ticket_estimator.services.base import BaseFareProvider
from ticket_estimator.services.discounts import apply_group_discounts
from ticket_estimator.services.fares import price_for
from ticket_estimator.services.validation import validate_trip
from ticket_estimator.utils.clock import local_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Estimation:
    """Outcome of one estimation: a price, or the failure that replaced it."""

    price: float | None = None
    error: EstimationFailed | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        if self.error is not None:
            raise self.error
        return self.price  # type: ignore[return-value]


class TicketEstimator:
    """Validate a trip, fetch its base fare and price the whole group."""

    def __init__(self, provider: BaseFareProvider) -> None:
        self.provider = provider

    async def estimate(self, trip: TripRequest, now: datetime | None = None) -> float:
        now = now if now is not None else local_now()
        try:
            validate_trip(trip, now=now)
            base_fare = await self.provider.get_base_fare(trip.details)
            total = price_for(base_fare, trip.passengers, trip.details.when, now=now)
            price = apply_group_discounts(total, base_fare, trip.passengers)
        except Exception as exc:
            logger.warning(
                "Estimation %s -> %s failed: %s",
                trip.details.origin, trip.details.destination, exc,
            )
            raise EstimationFailed() from exc

        logger.info(
            "Estimated %s -> %s for %d passenger(s): %.2f",
            trip.details.origin, trip.details.destination, len(trip.passengers), price,
        )
        return price

    async def try_estimate(self, trip: TripRequest, now: datetime | None = None) -> Estimation:
        try:
            return Estimation(price=await self.estimate(trip, now=now))
        except EstimationFailed as exc:
            return Estimation(error=exc)
