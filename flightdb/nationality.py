"""Nationality records and their store, indexed in registration order."""

from dataclasses import dataclass

from flightdb.config import DatasetType, sizes_for


@dataclass(frozen=True)
class Nationality:
    """A nationality, identified by its name."""

    name: str


class NationalityManager:
    """Assigns each distinct nationality a stable index, in order of first sight."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.capacity = sizes_for(dataset_type).nationalities
        self._nationalities = []
        self._index = {}

    def __len__(self):
        return len(self._nationalities)

    def __iter__(self):
        return iter(self._nationalities)

    def register(self, name):
        """Return the index of a nationality, adding it first if it is new."""
        position = self._index.get(name)
        if position is not None:
            return position
        position = len(self._nationalities)
        self._nationalities.append(Nationality(name))
        self._index[name] = position
        return position

    def get_by_index(self, index):
        """Return the nationality stored at an index."""
        if not 0 <= index < len(self._nationalities):
            raise IndexError(f"nationality index {index} out of range")
        return self._nationalities[index]

    def index_of(self, name):
        """Return the index of a nationality, or None if it was never registered."""
        return self._index.get(name)

    def prepare(self):
        """Rebuild the name index from the stored nationalities for querying."""
        self._index = {
            nationality.name: position
            for position, nationality in enumerate(self._nationalities)
        }