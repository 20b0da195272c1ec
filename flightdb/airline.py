"""Airline records, their accumulated delays and their store."""

from dataclasses import dataclass
from itertools import islice

from flightdb.config import DatasetType, sizes_for


def _rounded_average_thousandths(total, count):
    """Return round(1000 * total / count), rounding halves away from zero."""
    numerator = 1000 * total
    quotient, remainder = divmod(abs(numerator), count)
    if 2 * remainder >= count:
        quotient += 1
    return -quotient if numerator < 0 else quotient


@dataclass
class Airline:
    """An airline with the number of delays recorded and their sum."""

    name: str
    total_delay: int
    delay_count: int = 1

    def add_delay(self, delay):
        """Record one more delay for this airline."""
        self.delay_count += 1
        self.total_delay += delay

    @property
    def average_delay(self):
        """Mean delay per recorded flight."""
        return self.total_delay / self.delay_count

    def sort_key(self):
        """Order by highest average delay (to a thousandth) first, then by name."""
        average = _rounded_average_thousandths(self.total_delay, self.delay_count)
        return (-average, self.name)


class AirlineManager:
    """Stores airlines, accumulates their delays and ranks them once prepared."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.capacity = sizes_for(dataset_type).airlines
        self._airlines = []
        self._index = {}

    def __len__(self):
        return len(self._airlines)

    def __iter__(self):
        return iter(self._airlines)

    def _lookup_table(self):
        if self._index is None:
            raise RuntimeError("airline lookup is unavailable after prepare()")
        return self._index

    def register(self, name, delay):
        """Add a delay to the named airline, creating it if it is new; return it."""
        index = self._lookup_table()
        position = index.get(name)
        if position is not None:
            airline = self._airlines[position]
            airline.add_delay(delay)
            return airline
        airline = Airline(name, delay)
        index[name] = len(self._airlines)
        self._airlines.append(airline)
        return airline

    def get(self, name):
        """Return the airline with this name, or None."""
        position = self._lookup_table().get(name)
        return None if position is None else self._airlines[position]

    def prepare(self):
        """Drop the lookup table and sort airlines by average delay for ranking."""
        self._lookup_table()
        self._index = None
        self._airlines.sort(key=Airline.sort_key)

    def top_most_delayed(self, n):
        """Return up to n airlines with the highest average delay."""
        return list(islice(self._airlines, max(n, 0)))