# flightdesk

flightdesk keeps a catalogue of flights in memory. You can drive it from a
console menu or use it as a library. Each flight has an id, a departure
airport, a destination airport, a duration in minutes, a number of free
seats and a ticket price. All values are whole numbers, except the id and
the airports, which are strings.

## Installation

```
pip install .
```

## The console menu

```
flightdesk
```

The command takes no options apart from `--help`. The menu and prompts are in
Romanian. Input is read as whitespace-separated words, so ids and airport
names cannot contain spaces.

The options are:

1. Add a flight. You are asked for the id, departure, destination,
   duration, free seats and price in turn.
2. List every flight.
3. List the flights shorter than two hours (under 120 minutes).
4. Raise by 10% the ticket price of every flight with fewer than 20 free
   seats, rounding down to a whole number. All flights are listed afterwards.
5. Split every flight longer than 12 hours (over 720 minutes) into three
   legs. The legs get the ids `<id>_A`, `<id>_B` and `<id>_C` and run from
   the departure to `Escala1`, from `Escala1` to `Escala2`, and from
   `Escala2` to the destination. Duration, seats and price are divided in
   thirds, the last leg taking the remainder. The original flight is
   removed and the legs are added to the end of the list.
6. Show statistics: the number of flights, the total free seats and the
   sum of all ticket prices.
7. Quit. The menu prints `Optiune inexistenta` for this option before it
   exits, as it does for any number it does not know.

A value that is not a whole number where one is expected cancels the
current action with a message. The menu also stops when input ends.

## Library use

```python
from flightdesk.flight import Flight
from flightdesk.service import FlightService

service = FlightService()
service.add_flight(Flight("1", "OTP", "LHR", 180, 100, 500))
service.add_flight(Flight("2", "OTP", "CDG", 90, 10, 300))

short = service.filter_shorter_than(120)       # [flight "2"]
raised = service.raise_prices_for_low_seats()  # flight "2" now costs 330
legs = service.split_long_flights(720)         # [] – nothing is over 720 minutes
stats = service.statistics()                   # FlightStatistics(2, 110, 830)
```

- `Flight` (in `flightdesk.flight`) is a frozen dataclass with the fields
  `id`, `departure`, `destination`, `duration`, `seats` and `price`;
  `with_price(price)` returns a copy with a new price.
- `FlightRepository` (in `flightdesk.repository`) stores flights in
  insertion order. It has `add`, `remove` (does nothing for an unknown id),
  `update` (returns whether a flight with that id was replaced), `replace`
  and `find` (both raise `FlightNotFoundError` for an unknown id),
  `update_price`, `all`, `len()` and iteration.
- `FlightService` (in `flightdesk.service`) wraps a repository, either one
  you pass in or a new empty one. Besides the operations above it has
  `remove_flight`, `update_flight` and `find_flight`; `find_flight` raises
  `FlightNotFoundError` when no flight has the requested id.
  `raise_prices_for_low_seats` and `split_long_flights` return the flights
  they changed or created.
- `ConsoleUi` (in `flightdesk.ui`) is the menu. It accepts a service and
  text streams for input and output, which makes it easy to script.

## What it does not do

Flights live only in memory: nothing is saved to or loaded from a file, so
the catalogue is empty each time `flightdesk` starts. The console menu has no
options for removing or editing a single flight; those are available only
through `FlightService`.

## Tests

```
pip install .[test]
pytest
```