from flights.domain.models import BookingConfirmation, Flight, Seat, SeatMap
from flights.domain.value_objects import (
    DEFAULT_LAYOUT,
    FlightId,
    Money,
    SeatLayout,
    SeatPreferences,
)

__all__ = [
    "Flight",
    "Seat",
    "SeatMap",
    "BookingConfirmation",
    "FlightId",
    "Money",
    "SeatLayout",
    "SeatPreferences",
    "DEFAULT_LAYOUT",
]
