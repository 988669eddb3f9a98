"""Operations on the flight list: filtering, price changes, splitting and totals."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise

from .flight import Flight
from .repository import FlightRepository

LOW_SEATS_LIMIT = 20
PRICE_INCREASE = 1.1
SHORT_FLIGHT_LIMIT = 120
LONG_FLIGHT_LIMIT = 720
STOPOVERS = ("Escala1", "Escala2")
LEG_SUFFIXES = ("_A", "_B", "_C")


@dataclass(frozen=True)
class FlightStatistics:
    """Totals over all stored flights."""

    total_flights: int
    total_seats: int
    total_price: int


def _third(value: int) -> int:
    """Divide by three, truncating towards zero."""
    quotient = abs(value) // 3
    return quotient if value >= 0 else -quotient


def _three_parts(value: int) -> tuple[int, int, int]:
    first = _third(value)
    return first, first, value - 2 * first


class FlightService:
    """Business operations over a flight repository."""

    def __init__(self, repository: FlightRepository | None = None) -> None:
        self._repository = repository if repository is not None else FlightRepository()

    def add_flight(self, flight: Flight) -> None:
        self._repository.add(flight)

    def remove_flight(self, flight_id: str) -> None:
        self._repository.remove(flight_id)

    def update_flight(self, flight: Flight) -> bool:
        """Replace the flight with the same id; report whether one was found."""
        return self._repository.update(flight)

    def find_flight(self, flight_id: str) -> Flight:
        return self._repository.find(flight_id)

    def all_flights(self) -> list[Flight]:
        return self._repository.all()

    def filter_shorter_than(self, duration: int) -> list[Flight]:
        """Return the flights whose duration is strictly below the limit."""
        return [flight for flight in self._repository if flight.duration < duration]

    def raise_prices_for_low_seats(self) -> list[Flight]:
        """Raise by 10% the price of flights with fewer than 20 free seats.

        Returns the updated flights.
        """
        raised = []
        for flight in self._repository:
            if flight.seats < LOW_SEATS_LIMIT:
                updated = flight.with_price(int(flight.price * PRICE_INCREASE))
                self._repository.update(updated)
                raised.append(updated)
        return raised

    def split_long_flights(self, threshold: int = LONG_FLIGHT_LIMIT) -> list[Flight]:
        """Split every flight longer than the threshold into three legs with two stopovers.

        Duration, seats and price are divided in thirds, the last leg taking the
        remainder. The original flight is removed and the legs are appended.
        Returns the new legs.
        """
        created = []
        for flight in self._repository:
            if flight.duration <= threshold:
                continue
            self._repository.remove(flight.id)
            stops = (flight.departure, *STOPOVERS, flight.destination)
            for suffix, (start, end), duration, seats, price in zip(
                LEG_SUFFIXES,
                pairwise(stops),
                _three_parts(flight.duration),
                _three_parts(flight.seats),
                _three_parts(flight.price),
            ):
                leg = Flight(flight.id + suffix, start, end, duration, seats, price)
                self._repository.add(leg)
                created.append(leg)
        return created

    def statistics(self) -> FlightStatistics:
        flights = self._repository.all()
        return FlightStatistics(
            total_flights=len(flights),
            total_seats=sum(flight.seats for flight in flights),
            total_price=sum(flight.price for flight in flights),
        )