"""Flight service - catalog search and flight lookup.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import date
from decimal import Decimal

from flights.domain.errors import FlightNotFoundError, InvalidFlightIdError
from flights.domain.models import Flight
from flights.domain.value_objects import FlightId
from flights.stores.interfaces import FlightSearchCriteria, FlightStore


class FlightService:
    """Service for flight catalog operations."""

    def __init__(self, store: FlightStore) -> None:
        self._store = store

    def list_flights(
        self,
        destination: str | None = None,
        departure_date: date | None = None,
        max_duration_minutes: int | None = None,
        max_price: Decimal | None = None,
    ) -> list[Flight]:
        """Return flights matching every given filter."""
        criteria = FlightSearchCriteria(
            destination=destination,
            departure_date=departure_date,
            max_duration_minutes=max_duration_minutes,
            max_price=max_price,
        )
        return self._store.list_flights(criteria)

    def get_flight(self, flight_id: str | int) -> Flight:
        """Return a flight by ID.

        Raises:
            InvalidFlightIdError: If the flight_id is not a positive integer.
            FlightNotFoundError: If the flight does not exist.
        """
        try:
            parsed_id = FlightId.from_string(str(flight_id))
        except ValueError as exc:
            raise InvalidFlightIdError() from exc

        flight = self._store.get_flight(parsed_id)
        if flight is None:
            raise FlightNotFoundError(str(flight_id))
        return flight
