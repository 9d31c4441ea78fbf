"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from flights.domain import Flight, FlightId


@dataclass(frozen=True)
class FlightSearchCriteria:
    """Optional catalog filters. A ``None`` field does not filter."""

    destination: str | None = None
    departure_date: date | None = None
    max_duration_minutes: int | None = None
    max_price: Decimal | None = None


class FlightStore(ABC):
    """Interface for flight persistence operations."""

    @abstractmethod
    def list_flights(self, criteria: FlightSearchCriteria) -> list[Flight]:
        """Return flights matching all given criteria, ordered by departure time."""
        ...

    @abstractmethod
    def get_flight(self, flight_id: FlightId) -> Flight | None:
        """Return a flight by ID, or None if not found."""
        ...
