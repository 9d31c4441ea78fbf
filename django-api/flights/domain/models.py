"""Domain models representing flights, seats and bookings.

These are pure domain objects with no API input rules.
Django ORM models are in flights/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from flights.domain.value_objects import FlightId


@dataclass(frozen=True)
class Flight:
    """Domain representation of a Flight.

    ``occupied_seat_numbers`` is a snapshot taken when the flight was loaded.
    """

    id: FlightId
    flight_number: str
    origin: str
    destination: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal | None
    aircraft_type: str
    occupied_seat_numbers: frozenset[str] = frozenset()

    @property
    def duration(self) -> timedelta:
        return self.arrival_time - self.departure_time


@dataclass(frozen=True)
class Seat:
    """One cell of a flight's seat grid."""

    seat_number: str
    row: int
    column: str
    is_window: bool
    has_extra_legroom: bool
    is_near_exit: bool
    is_first_class: bool
    is_occupied: bool = False


@dataclass(frozen=True)
class SeatMap:
    """Full seat grid of a flight plus the recommended block."""

    total_rows: int
    columns: tuple[str, ...]
    seats: tuple[Seat, ...]
    recommended_seat_numbers: tuple[str, ...] = ()


@dataclass(frozen=True)
class BookingConfirmation:
    """Priced booking returned to the caller. Occupancy is not updated."""

    booking_id: int
    flight_id: FlightId
    flight_number: str
    passengers: int
    confirmed_seats: tuple[str, ...]
    total_price: Decimal
    booked_at: datetime
