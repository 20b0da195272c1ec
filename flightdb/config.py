"""Dataset kinds and the record counts each one is sized for."""

from dataclasses import dataclass
from enum import Enum

DAYS = 273
WEEKS = 38
BUFFER_SIZE = 1024


class DatasetType(Enum):
    """Size class of a dataset."""

    NORMAL = "normal"
    LARGE = "large"


class DatasetVersion(Enum):
    """Whether a dataset contains invalid records."""

    WITH_ERRORS = "with_errors"
    WITHOUT_ERRORS = "without_errors"


@dataclass(frozen=True)
class DatasetSizes:
    """Expected number of records of each entity in a dataset."""

    aircrafts: int
    airlines: int
    airports: int
    flights: int
    nationalities: int
    passengers: int
    reservations: int
    days: int = DAYS
    weeks: int = WEEKS


_SIZES = {
    DatasetType.NORMAL: DatasetSizes(
        aircrafts=1000,
        airlines=30,
        airports=7354,
        flights=1108699,
        nationalities=55,
        passengers=200000,
        reservations=20000,
    ),
    DatasetType.LARGE: DatasetSizes(
        aircrafts=5000,
        airlines=30,
        airports=7354,
        flights=5616627,
        nationalities=55,
        passengers=2000000,
        reservations=4000000,
    ),
}


def sizes_for(dataset_type):
    """Return the record counts for a dataset type (enum member or its value)."""
    return _SIZES[DatasetType(dataset_type)]