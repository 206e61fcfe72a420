from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ticket_estimator.errors import BaseFareError
from ticket_estimator.models import TripDetails


class BaseFareProvider(ABC):
    """Contract for every base-fare source.

    Rules:
    - Return ONLY a fare obtained from the source; never substitute a default.
    - Any failure (transport, status, payload) surfaces as BaseFareError.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.logger = logging.getLogger(f"provider.{name}")

    @abstractmethod
    async def fetch_raw(self, details: TripDetails) -> Any:
        ...

    @abstractmethod
    def parse(self, raw: Any) -> float:
        ...

    async def get_base_fare(self, details: TripDetails) -> float:
        try:
            raw = await self.fetch_raw(details)
            fare = self.parse(raw)
        except BaseFareError:
            self.logger.warning(
                "'%s': no base fare for %s -> %s",
                self.name, details.origin, details.destination,
            )
            raise
        except Exception as exc:
            self.logger.exception("'%s': unexpected failure", self.name)
            raise BaseFareError(f"{self.name}: {exc}") from exc
        self.logger.info(
            "'%s': base fare %s -> %s = %.2f",
            self.name, details.origin, details.destination, fare,
        )
        return fare


class StaticBaseFareProvider(BaseFareProvider):
    """Always answers with the same fare; for offline callers and tests."""

    def __init__(self, fare: float) -> None:
        super().__init__("static")
        self.fare = fare

    async def fetch_raw(self, details: TripDetails) -> Any:
        return self.fare

    def parse(self, raw: Any) -> float:
        return float(raw)
