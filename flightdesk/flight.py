"""The flight record kept by the booking desk."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class Flight:
    """A single flight: route, duration in minutes, free seats and ticket price."""

    id: str = "0"
    departure: str = "0"
    destination: str = "0"
    duration: int = 0
    seats: int = 0
    price: int = 0

    def with_price(self, price: int) -> Flight:
        """Return a copy of this flight with a different ticket price."""
        return dataclasses.replace(self, price=price)