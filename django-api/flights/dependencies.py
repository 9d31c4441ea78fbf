"""Service wiring for the HTTP handlers."""

from functools import lru_cache

from flights.conf import get_first_class_surcharge, get_seat_layout
from flights.services.booking_service import BookingService
from flights.services.flight_service import FlightService
from flights.services.seat_service import SeatService
from flights.stores.django_store import DjangoFlightStore


def get_flight_service() -> FlightService:
    return FlightService(DjangoFlightStore())


def get_seat_service() -> SeatService:
    return SeatService(get_seat_layout())


@lru_cache(maxsize=1)
def get_booking_service() -> BookingService:
    # Cached so booking ids keep increasing for the life of the process.
    return BookingService(
        flight_service=get_flight_service(),
        seat_service=get_seat_service(),
        first_class_surcharge=get_first_class_surcharge(),
    )
