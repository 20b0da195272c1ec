"""Passenger records, their weekly spending and their store."""

import heapq
import math
from collections import Counter
from dataclasses import dataclass

from flightdb.config import DatasetType, sizes_for

TOP_SPENDERS_PER_WEEK = 10


def _cents(price):
    """Convert a price to whole cents, rounding halves away from zero."""
    scaled = price * 100.0
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


@dataclass(frozen=True)
class Passenger:
    """A passenger's name, document number, birth date and nationality index."""

    first_name: str
    last_name: str
    document_number: int
    dob: int
    nationality: int


class PassengerManager:
    """Stores passengers, collects their weekly spending and ranks top spenders."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        sizes = sizes_for(dataset_type)
        self.capacity = sizes.passengers
        self.weeks = sizes.weeks
        self._passengers = []
        self._index = {}
        self._spendings = [[] for _ in range(self.weeks)]
        self._weekly_top = None

    def __len__(self):
        return len(self._passengers)

    def __iter__(self):
        return iter(self._passengers)

    def register(self, document_number, first_name, last_name, dob, nationality):
        """Add a passenger and return it."""
        passenger = Passenger(first_name, last_name, document_number, dob, nationality)
        self._index[document_number] = len(self._passengers)
        self._passengers.append(passenger)
        return passenger

    def get(self, document_number):
        """Return the passenger with this document number, or None."""
        position = self._index.get(document_number)
        return None if position is None else self._passengers[position]

    def index_of(self, document_number):
        """Return the storage position of a passenger, or None if unknown."""
        return self._index.get(document_number)

    def register_spending(self, document_number, price, week):
        """Record that a passenger spent a price in a given week index."""
        if self._weekly_top is not None:
            raise RuntimeError("spending cannot be registered after prepare()")
        if not 0 <= week < self.weeks:
            raise IndexError(f"week {week} out of range")
        position = self._index.get(document_number)
        if position is None:
            raise KeyError(f"unknown passenger: {document_number!r}")
        self._spendings[week].append((position, _cents(price)))

    def _week_top(self, spendings):
        totals = Counter()
        for position, cents in spendings:
            totals[position] += cents
        candidates = (
            (cents, self._passengers[position].document_number)
            for position, cents in totals.items()
            if cents != 0
        )
        best = heapq.nsmallest(
            TOP_SPENDERS_PER_WEEK, candidates, key=lambda item: (-item[0], item[1])
        )
        return tuple(document_number for _, document_number in best)

    def prepare(self):
        """Compute each week's top spenders and discard the raw spendings."""
        if self._weekly_top is not None:
            raise RuntimeError("passengers already prepared")
        self._weekly_top = [self._week_top(week) for week in self._spendings]
        self._spendings = None

    def most_frequent_top_spender(self, first_week, last_week):
        """Return (passenger, appearances) for whoever was most often a weekly top spender.

        Ties go to the lowest document number. Returns None when the range holds
        no weeks of the calendar or nobody appears in it.
        """
        if self._weekly_top is None:
            raise RuntimeError("passengers must be prepared before queries")
        if first_week > last_week or first_week >= self.weeks or last_week < 0:
            return None
        first_week = max(first_week, 0)
        last_week = min(last_week, self.weeks - 1)
        appearances = Counter(
            document_number
            for top in self._weekly_top[first_week:last_week + 1]
            for document_number in top
        )
        if not appearances:
            return None
        document_number, count = min(
            appearances.items(), key=lambda item: (-item[1], item[0])
        )
        return self.get(document_number), count