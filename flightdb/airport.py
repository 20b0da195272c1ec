"""Airport records, visit counters and their store."""

from dataclasses import dataclass

from flightdb.config import DatasetType, sizes_for
from flightdb.count_matrix import CountMatrix


def code_to_int(code):
    """Pack a three-letter airport code into an integer, five bits per letter."""
    if len(code) != 3:
        raise ValueError(f"airport code must have three letters: {code!r}")
    first, second, third = (ord(char) - ord("A") for char in code)
    return 32 * 32 * first + 32 * second + third


def int_to_code(code):
    """Unpack an integer made by code_to_int back into the three-letter code."""
    return "".join(
        chr(part % 32 + ord("A")) for part in (code // (32 * 32), code // 32, code)
    )


def _as_code_int(code):
    return code_to_int(code) if isinstance(code, str) else code


@dataclass
class Airport:
    """An airport and the number of arrivals and departures it saw."""

    name: str
    city: str
    type: str
    country: str
    code: int
    arrival_count: int = 0
    departure_count: int = 0

    @property
    def code_string(self):
        """The airport code as three letters."""
        return int_to_code(self.code)


class AirportManager:
    """Stores airports and counts their visits per day and per nationality."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        sizes = sizes_for(dataset_type)
        self.capacity = sizes.airports
        self._airports = []
        self._index = {}
        self._by_day = CountMatrix(sizes.days, sizes.airports)
        self._by_nationality = CountMatrix(sizes.nationalities, sizes.airports)
        self._prepared = False

    def __len__(self):
        return len(self._airports)

    def __iter__(self):
        return iter(self._airports)

    def register(self, code, name, city, type, country):
        """Add an airport with the given three-letter code and return it."""
        if len(self._airports) >= self.capacity:
            raise RuntimeError("airport capacity exceeded")
        airport = Airport(name, city, type, country, code_to_int(code))
        self._index[airport.code] = len(self._airports)
        self._airports.append(airport)
        return airport

    def get(self, code):
        """Return the airport with this code (integer or letters), or None."""
        position = self._index.get(_as_code_int(code))
        return None if position is None else self._airports[position]

    def _column(self, code):
        position = self._index.get(_as_code_int(code))
        if position is None:
            raise KeyError(f"unknown airport: {code!r}")
        return position

    def increment_day_count(self, day, code):
        """Count one visit to an airport on a given day index."""
        self._by_day.increment(day, self._column(code))

    def increment_nationality_count(self, nationality, code):
        """Count one visit to an airport by a passenger of a nationality index."""
        self._by_nationality.increment(nationality, self._column(code))

    def prepare(self):
        """Turn the per-day counters into running totals for range queries."""
        if self._prepared:
            raise RuntimeError("airports already prepared")
        self._by_day.accumulate()
        self._prepared = True

    def _most_visited(self, counts):
        best = None
        for airport, count in zip(self._airports, counts):
            if best is None or count > best[1] or (
                count == best[1] and airport.code < best[0].code
            ):
                best = (airport, count)
        return best

    def most_visited_between_days(self, first_day, last_day):
        """Return (airport, visits) for the most visited airport in a day range.

        Ties go to the lowest code. Returns None when the range holds no days
        of the calendar or no airport is stored.
        """
        if not self._prepared:
            raise RuntimeError("airports must be prepared before range queries")
        nlines = self._by_day.nlines
        if first_day > last_day or first_day >= nlines or last_day < 0:
            return None
        last_day = min(last_day, nlines - 1)
        upper = self._by_day.line(last_day)
        if first_day > 0:
            lower = self._by_day.line(first_day - 1)
            counts = [high - low for high, low in zip(upper, lower)]
        else:
            counts = list(upper)
        return self._most_visited(counts)

    def most_visited_by_nationality(self, nationality):
        """Return (airport, visits) for the airport most visited by a nationality.

        Ties go to the lowest code. Returns None for an unknown nationality
        (None) or when no airport is stored.
        """
        if nationality is None:
            return None
        return self._most_visited(self._by_nationality.line(nationality))