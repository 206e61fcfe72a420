from __future__ import annotations

from datetime import datetime

from ticket_estimator.errors import InvalidInput
from ticket_estimator.models import TripRequest
from ticket_estimator.utils.clock import local_now, start_of_day, to_local


def validate_trip(trip: TripRequest, now: datetime | None = None) -> None:
    """Reject a trip on the first failed precondition.

    Checked in order: passengers present, origin, destination, then a travel
    date no earlier than local midnight of ``now``'s day.
    """
    if not trip.passengers:
        raise InvalidInput("No passengers specified")

    details = trip.details
    if not details.origin.strip():
        raise InvalidInput("Start city is invalid")
    if not details.destination.strip():
        raise InvalidInput("Destination city is invalid")

    reference = to_local(now) if now is not None else local_now()
    if to_local(details.when) < start_of_day(reference):
        raise InvalidInput("Date is invalid")
