"""Interactive console menu for managing flights."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from .flight import Flight
from .service import LONG_FLIGHT_LIMIT, SHORT_FLIGHT_LIMIT, FlightService

EXIT_OPTION = 7

MENU = (
    "1.Adaugare zbor",
    "2.F1.Listare toate zboruri",
    "3.F2.Identificare si listare zbor durata < 2 ore",
    "4.F3.Zbor<20pasageri modificare pret",
    "5.F4.Escala",
    "6.F5.Afisare statistici",
    "7.Iesire",
)


class ConsoleUi:
    """Menu-driven console front end reading whitespace-separated input."""

    def __init__(
        self,
        service: FlightService | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.service = service if service is not None else FlightService()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = self._token_stream()

    def _token_stream(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    def _write(self, text: str = "") -> None:
        print(text, file=self._out)

    def _read_word(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def _read_int(self, prompt: str) -> int:
        word = self._read_word(prompt)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not a whole number: {word!r}") from None

    def _actions(self) -> dict[int, Callable[[], None]]:
        return {
            1: self.add_flight,
            2: self.print_all_flights,
            3: self.print_short_flights,
            4: self.raise_prices,
            5: self.split_long_flights,
            6: self.print_statistics,
        }

    def run(self) -> None:
        """Show the menu and carry out options until 7 is chosen or input ends."""
        actions = self._actions()
        while True:
            self.show_menu()
            try:
                option: int | None = self._read_int("Alege optiunea: ")
            except EOFError:
                self._write()
                return
            except ValueError:
                option = None
            action = actions.get(option) if option is not None else None
            if action is None:
                self._write("Optiune inexistenta")
            else:
                try:
                    action()
                except EOFError:
                    self._write()
                    return
                except ValueError as exc:
                    self._write(f"Valoare invalida: {exc}")
            if option == EXIT_OPTION:
                return

    def show_menu(self) -> None:
        for line in MENU:
            self._write(line)

    def add_flight(self) -> None:
        flight_id = self._read_word("Introduceti ID-ul zborului: ")
        departure = self._read_word("Introduceti aeroportul de plecare: ")
        destination = self._read_word("Introduceti aeroportul de destinatie: ")
        duration = self._read_int("Introduceti durata zborului (in minute): ")
        seats = self._read_int("Introduceti numarul de locuri disponibile: ")
        price = self._read_int("Introduceti pretul biletului: ")
        self.service.add_flight(Flight(flight_id, departure, destination, duration, seats, price))

    def print_all_flights(self) -> None:
        for flight in self.service.all_flights():
            self._write(
                f"ID: {flight.id}, Plecare: {flight.departure}, "
                f"Destinatie: {flight.destination}, Durata: {flight.duration}, "
                f"Locuri disponibile: {flight.seats}, Pret bilet: {flight.price}"
            )

    def print_short_flights(self) -> None:
        for flight in self.service.filter_shorter_than(SHORT_FLIGHT_LIMIT):
            self._write(
                f"ID: {flight.id}, Plecare: {flight.departure}, "
                f"Destinatie: {flight.destination}, Durata: {flight.duration}"
            )

    def raise_prices(self) -> None:
        if self.service.raise_prices_for_low_seats():
            self._write(
                "Preturile biletelor pentru zborurile cu mai putin de 20 de locuri "
                "au fost majorate cu 10%."
            )
        else:
            self._write("Nu exista zboruri cu mai putin de 20 de locuri!")
        self.print_all_flights()

    def split_long_flights(self) -> None:
        if self.service.split_long_flights(LONG_FLIGHT_LIMIT):
            self._write("Zborurile peste 12 ore au fost fragmentate in 3 cu doua escale tehnice!")
        else:
            self._write("Nu exista zboruri cu durata peste 12 ore!")

    def print_statistics(self) -> None:
        stats = self.service.statistics()
        self._write(f"Total zboruri: {stats.total_flights}")
        self._write(f"Total locuri disponibile: {stats.total_seats}")
        self._write(f"Total pret bilete: {stats.total_price}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive flight desk."""
    parser = argparse.ArgumentParser(prog="flightdesk", description="Manage flights from the console.")
    parser.parse_args(argv)
    ConsoleUi().run()
    return 0