from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable


class DiscountCard(str, Enum):
    SENIOR = "Senior"
    STAFF = "StaffCard"
    COUPLE = "Couple"
    HALF_COUPLE = "HalfCouple"
    FAMILY = "Family"


@dataclass(frozen=True)
class Passenger:
    age: float
    last_name: str = ""
    discounts: frozenset[DiscountCard] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of cards (list, tuple, set) from the caller.
        object.__setattr__(self, "discounts", frozenset(self.discounts))

    def holds(self, card: DiscountCard) -> bool:
        return card in self.discounts

    @property
    def is_minor(self) -> bool:
        return self.age < 18


@dataclass(frozen=True)
class TripDetails:
    origin: str
    destination: str
    when: datetime


@dataclass(frozen=True)
class TripRequest:
    details: TripDetails
    passengers: tuple[Passenger, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "passengers", tuple(self.passengers))

    @classmethod
    def of(
        cls,
        origin: str,
        destination: str,
        when: datetime,
        passengers: Iterable[Passenger],
    ) -> TripRequest:
        return cls(TripDetails(origin, destination, when), tuple(passengers))
