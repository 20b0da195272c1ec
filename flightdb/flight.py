"""Flight records and their store, keyed by flight id."""

from dataclasses import dataclass

from flightdb.config import DatasetType, sizes_for


def flight_id_to_int(flight_id):
    """Pack a flight id (two letters then digits) into a single integer.

    The low bit records whether the numeric part has six digits, so ids that
    differ only in zero padding get distinct keys.
    """
    if len(flight_id) < 2:
        raise ValueError(f"flight id too short: {flight_id!r}")
    letters = (ord(flight_id[0]) - ord("A")) * 26 + (ord(flight_id[1]) - ord("A"))
    digits = flight_id[2:]
    number = 0
    for char in digits:
        number = number * 10 + (ord(char) - ord("0"))
    base = letters * 1000000 + number
    return (base << 1) | (1 if len(digits) == 6 else 0)


@dataclass(frozen=True)
class Flight:
    """A flight's airports, scheduled departure week and status."""

    origin: int
    destination: int
    week: int
    status: int


class FlightManager:
    """Stores flights and looks them up by id until prepared."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.capacity = sizes_for(dataset_type).flights
        self._flights = []
        self._index = {}

    def __len__(self):
        return len(self._flights)

    def __iter__(self):
        return iter(self._flights)

    def _lookup_table(self):
        if self._index is None:
            raise RuntimeError("flight lookup is unavailable after prepare()")
        return self._index

    def register(self, flight_id, origin, destination, week, status):
        """Add a flight and return it."""
        index = self._lookup_table()
        flight = Flight(origin, destination, week, status)
        index[flight_id_to_int(flight_id)] = len(self._flights)
        self._flights.append(flight)
        return flight

    def get(self, flight_id):
        """Return the flight with this id, or None."""
        position = self._lookup_table().get(flight_id_to_int(flight_id))
        return None if position is None else self._flights[position]

    def prepare(self):
        """Drop the lookup table; flights stay stored."""
        self._lookup_table()
        self._index = None