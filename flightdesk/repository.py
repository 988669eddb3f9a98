"""In-memory storage of flights, kept in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .flight import Flight


class FlightNotFoundError(LookupError):
    """Raised when no stored flight has the requested id."""

    def __init__(self, flight_id: str) -> None:
        super().__init__(f"no flight with id {flight_id!r}")
        self.flight_id = flight_id


class FlightRepository:
    """An ordered collection of flights looked up by id."""

    def __init__(self, flights: Iterable[Flight] = ()) -> None:
        self._flights: list[Flight] = list(flights)

    def _index_of(self, flight_id: str) -> int | None:
        return next(
            (index for index, flight in enumerate(self._flights) if flight.id == flight_id),
            None,
        )

    def add(self, flight: Flight) -> None:
        """Append a flight."""
        self._flights.append(flight)

    def remove(self, flight_id: str) -> None:
        """Remove the first flight with this id; do nothing if there is none."""
        index = self._index_of(flight_id)
        if index is not None:
            del self._flights[index]

    def update(self, flight: Flight) -> bool:
        """Replace the stored flight with the same id, if any; report whether one was."""
        index = self._index_of(flight.id)
        if index is None:
            return False
        self._flights[index] = flight
        return True

    def replace(self, flight: Flight) -> None:
        """Replace the stored flight with the same id, or raise FlightNotFoundError."""
        if not self.update(flight):
            raise FlightNotFoundError(flight.id)

    def find(self, flight_id: str) -> Flight:
        """Return the first flight with this id, or raise FlightNotFoundError."""
        index = self._index_of(flight_id)
        if index is None:
            raise FlightNotFoundError(flight_id)
        return self._flights[index]

    def update_price(self, flight_id: str, price: int) -> bool:
        """Set the ticket price of a flight; report whether the flight was found."""
        index = self._index_of(flight_id)
        if index is None:
            return False
        self._flights[index] = self._flights[index].with_price(price)
        return True

    def all(self) -> list[Flight]:
        """Return a copy of all stored flights in order."""
        return list(self._flights)

    def __len__(self) -> int:
        return len(self._flights)

    def __iter__(self) -> Iterator[Flight]:
        return iter(self.all())