"""The set of entity stores that make up a loaded dataset."""

from flightdb.aircraft import AircraftManager
from flightdb.airline import AirlineManager
from flightdb.airport import AirportManager
from flightdb.config import DatasetType
from flightdb.flight import FlightManager
from flightdb.nationality import NationalityManager
from flightdb.passenger import PassengerManager
from flightdb.reservation import ReservationManager


class DatabaseManager:
    """Holds one store per entity, all sized for the same dataset type."""

    def __init__(self, dataset_type=DatasetType.NORMAL):
        self.dataset_type = DatasetType(dataset_type)
        self.aircrafts = AircraftManager(self.dataset_type)
        self.airlines = AirlineManager(self.dataset_type)
        self.airports = AirportManager(self.dataset_type)
        self.flights = FlightManager(self.dataset_type)
        self.nationalities = NationalityManager(self.dataset_type)
        self.passengers = PassengerManager(self.dataset_type)
        self.reservations = ReservationManager(self.dataset_type)

    def prepare(self):
        """Prepare every store for queries once loading has finished."""
        self.aircrafts.prepare()
        self.airlines.prepare()
        self.airports.prepare()
        self.flights.prepare()
        self.nationalities.prepare()
        self.passengers.prepare()
        self.reservations.prepare()