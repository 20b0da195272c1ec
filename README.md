# flightdb

`flightdb` keeps aviation records in memory and answers ranking queries over
them. It covers aircraft, airlines, airports, flights, nationalities,
passengers and reservations. Each kind of record has its own manager class,
and `DatabaseManager` holds one of each, all sized for the same dataset type.

## Installation

Install the package with your usual Python packaging tool. It has no runtime
dependencies. The `test` extra adds `pytest`.

## Modules

| Module                   | Contents                                                              |
|--------------------------|-----------------------------------------------------------------------|
| `flightdb.config`        | `DatasetType`, `DatasetVersion`, `DatasetSizes` and `sizes_for`       |
| `flightdb.count_matrix`  | `CountMatrix`, a grid of counters that can be turned into running sums |
| `flightdb.aircraft`      | `Aircraft`, `AircraftManager`                                         |
| `flightdb.airline`       | `Airline`, `AirlineManager`                                           |
| `flightdb.airport`       | `Airport`, `AirportManager`, `code_to_int`, `int_to_code`             |
| `flightdb.flight`        | `Flight`, `FlightManager`, `flight_id_to_int`                         |
| `flightdb.nationality`   | `Nationality`, `NationalityManager`                                   |
| `flightdb.passenger`     | `Passenger`, `PassengerManager`                                       |
| `flightdb.reservation`   | `ReservationManager`                                                  |
| `flightdb.database`      | `DatabaseManager`, which combines all of the managers above           |
| `flightdb.interactive`   | `get_user_answer`, which prompts for one of a fixed set of answers    |

`sizes_for(DatasetType.NORMAL)` or `sizes_for("large")` returns the expected
record counts for a dataset type; each manager exposes the matching count as
`capacity`.

## Workflow

1. Create the managers, or a single `DatabaseManager(DatasetType.NORMAL)`.
2. Register records with each manager's `register` method.
3. Call `prepare()` on each manager, or once on the `DatabaseManager`.
4. Run the queries.

What `prepare()` does:

- `AircraftManager` and `AirlineManager` sort their records for ranking and
  drop their lookup tables; `get` and `register` then raise `RuntimeError`.
- `FlightManager` drops its lookup table the same way.
- `AirportManager` turns its per-day visit counters into running totals.
- `PassengerManager` works out each week's ten biggest spenders and discards
  the raw spending records.
- `NationalityManager` rebuilds its name index.
- `ReservationManager` discards the reservation ids it remembered.

Calling `prepare()` twice raises `RuntimeError`, except on `NationalityManager`.

## Queries

- `AircraftManager.top_most_flown(n, manufacturer=None)` returns up to `n`
  aircraft with the most flights, ties broken by identifier.
- `AirlineManager.top_most_delayed(n)` returns up to `n` airlines with the
  highest average delay (compared to a thousandth), ties broken by name.
- `AirportManager.most_visited_between_days(first_day, last_day)` returns
  `(airport, visits)` for a range of day indices, or `None` when the range lies
  outside the calendar. It requires `prepare()` first.
- `AirportManager.most_visited_by_nationality(nationality)` returns
  `(airport, visits)` for a nationality index, or `None` for `None`.
- `PassengerManager.most_frequent_top_spender(first_week, last_week)` returns
  `(passenger, appearances)` for whoever was most often among a week's ten
  biggest spenders, or `None`.

Airport ties go to the lowest code; passenger ties to the lowest document
number. Visits are counted with `increment_day_count` and
`increment_nationality_count`, which raise `KeyError` for an unknown airport.
Spending is recorded with `register_spending(document_number, price, week)`.

`ReservationManager.register` returns `True` for a new reservation id and
`False` for one already seen, which lets a loader reject duplicates.

## Airport codes

Three-letter airport codes are stored as compact integers:

```python
from flightdb.airport import code_to_int, int_to_code

number = code_to_int("LIS")
assert int_to_code(number) == "LIS"
```

`AirportManager.get` accepts either the integer or the three letters.

## Prompting for answers

`get_user_answer` reads lines until one matches an allowed answer and returns
that answer's position. Empty lines are read again silently; other wrong lines
print the invalid message. It raises `EOFError` if input runs out. The streams
default to standard input and output, and can be passed in:

```python
import io
from flightdb.interactive import get_user_answer

stdin = io.StringIO("maybe\ny\n")
stdout = io.StringIO()
index = get_user_answer("Continue? ", ["y", "n"], "Please answer 'y' or 'n'. ", stdin, stdout)
assert index == 0
```

## What the package does not do

The package does not read or validate dataset files, write error reports, or
parse query input lines, and it has no command-line program or interactive
query loop. Records must be registered through the managers' methods by the
calling code.