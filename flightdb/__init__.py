"""In-memory stores and ranking queries for aircraft, airline, airport, flight, nationality, passenger and reservation records."""

__version__ = "0.1.0"