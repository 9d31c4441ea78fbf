"""In-memory implementation of the FlightStore."""

from collections.abc import Iterable

from flights.domain import Flight, FlightId
from flights.stores.interfaces import FlightSearchCriteria, FlightStore


def matches_criteria(flight: Flight, criteria: FlightSearchCriteria) -> bool:
    if criteria.destination is not None and flight.destination.lower() != criteria.destination.lower():
        return False
    if criteria.departure_date is not None and flight.departure_time.date() != criteria.departure_date:
        return False
    if (
        criteria.max_duration_minutes is not None
        and flight.duration.total_seconds() > criteria.max_duration_minutes * 60
    ):
        return False
    if criteria.max_price is not None and (flight.price is None or flight.price > criteria.max_price):
        return False
    return True


class InMemoryFlightStore(FlightStore):
    """Dict-backed flight store."""

    def __init__(self, flights: Iterable[Flight] = ()) -> None:
        self._flights: dict[FlightId, Flight] = {flight.id: flight for flight in flights}

    def add(self, flight: Flight) -> None:
        self._flights[flight.id] = flight

    def list_flights(self, criteria: FlightSearchCriteria) -> list[Flight]:
        found = [f for f in self._flights.values() if matches_criteria(f, criteria)]
        return sorted(found, key=lambda f: (f.departure_time, f.id.value))

    def get_flight(self, flight_id: FlightId) -> Flight | None:
        return self._flights.get(flight_id)
