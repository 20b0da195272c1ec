"""Aircraft records and their store."""

from dataclasses import dataclass
from itertools import islice

from flightdb.config import DatasetType, sizes_for


@dataclass
class Aircraft:
    """An aircraft and the number of flights it made."""

    manufacturer: str
    model: str
    identifier: str
    flight_count: int = 0

    def sort_key(self):
        """Order by most flights first, then by identifier."""
        return (-self.flight_count, self.identifier)


class AircraftManager:
    """Stores aircraft, looks them up by identifier and ranks them once prepared."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.capacity = sizes_for(dataset_type).aircrafts
        self._aircrafts = []
        self._index = {}

    def __len__(self):
        return len(self._aircrafts)

    def __iter__(self):
        return iter(self._aircrafts)

    def _lookup_table(self):
        if self._index is None:
            raise RuntimeError("aircraft lookup is unavailable after prepare()")
        return self._index

    def register(self, manufacturer, model, identifier):
        """Add an aircraft with no flights and return it."""
        index = self._lookup_table()
        aircraft = Aircraft(manufacturer, model, identifier)
        index[identifier] = len(self._aircrafts)
        self._aircrafts.append(aircraft)
        return aircraft

    def get(self, identifier):
        """Return the aircraft with this identifier, or None."""
        position = self._lookup_table().get(identifier)
        return None if position is None else self._aircrafts[position]

    def prepare(self):
        """Drop the lookup table and sort aircraft by flights for ranking."""
        self._lookup_table()
        self._index = None
        self._aircrafts.sort(key=Aircraft.sort_key)

    def top_most_flown(self, n, manufacturer=None):
        """Return up to n aircraft with the most flights, optionally of one manufacturer."""
        matching = (
            a for a in self._aircrafts
            if manufacturer is None or a.manufacturer == manufacturer
        )
        return list(islice(matching, max(n, 0)))