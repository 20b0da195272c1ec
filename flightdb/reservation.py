"""Tracking of reservation identifiers to reject duplicates."""

from flightdb.config import DatasetType, sizes_for


class ReservationManager:
    """Remembers reservation ids seen while loading a dataset."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.capacity = sizes_for(dataset_type).reservations
        self._seen = set()

    def register(self, reservation_id):
        """Record an id; return True if it was new, False if already seen."""
        if self._seen is None:
            raise RuntimeError("reservations cannot be registered after prepare()")
        if reservation_id in self._seen:
            return False
        self._seen.add(reservation_id)
        return True

    def prepare(self):
        """Discard the remembered ids; no more registrations are accepted."""
        if self._seen is None:
            raise RuntimeError("reservations already prepared")
        self._seen = None