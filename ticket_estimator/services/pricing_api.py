from __future__ import annotations

import math
from typing import Any

from ticket_estimator.errors import BaseFareError
from ticket_estimator.models import TripDetails
from ticket_estimator.services.base import BaseFareProvider
from ticket_estimator.utils.cache import cached
from ticket_estimator.utils.http import fetch_json

def _trip_key(provider: HttpBaseFareProvider, details: TripDetails) -> tuple:
    return (provider.url, details.origin, details.destination, details.when.isoformat())


class HttpBaseFareProvider(BaseFareProvider):
    """Base fares from the train pricing HTTP API.

    GET ``?from=<origin>&to=<destination>&date=<ISO-8601>`` answers with a JSON
    object carrying a numeric ``price``. A non-2xx status, an unreadable body
    or a missing price all count as "no fare".
    """

    def __init__(self, url: str, retries: int = 1) -> None:
        super().__init__("pricing_api")
        self.url = url
        self.retries = retries

    @cached(_trip_key)
    async def fetch_raw(self, details: TripDetails) -> Any:
        params = {
            "from": details.origin,
            "to": details.destination,
            "date": details.when.isoformat(),
        }
        try:
            data = await fetch_json(self.url, params=params, retries=self.retries)
        except Exception as exc:
            raise BaseFareError(f"Pricing API unreachable: {exc}") from exc

        if not isinstance(data, dict) or data.get("price") is None:
            raise BaseFareError("Pricing API returned no price")
        return data

    def parse(self, raw: Any) -> float:
        price = raw["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise BaseFareError(f"Pricing API price is not a number: {price!r}")
        if not math.isfinite(price) or price < 0:
            raise BaseFareError(f"Pricing API price is out of range: {price}")
        return float(price)
