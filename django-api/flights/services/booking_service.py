"""Booking service - prices seat selections and issues booking confirmations."""

import itertools
import threading
from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal

from flights.domain.errors import InvalidSeatError, PriceConfigurationError
from flights.domain.models import BookingConfirmation, Flight
from flights.services.flight_service import FlightService
from flights.services.seat_service import SeatService


class BookingService:
    """Service for booking price computation and confirmation.

    Bookings are not persisted and do not mark seats as occupied.
    """

    def __init__(
        self,
        flight_service: FlightService,
        seat_service: SeatService,
        first_class_surcharge: Decimal,
    ) -> None:
        self._flight_service = flight_service
        self._seat_service = seat_service
        self._first_class_surcharge = first_class_surcharge
        self._booking_ids = itertools.count(1)
        self._lock = threading.Lock()

    def compute_booking_price(
        self, flight: Flight, passenger_count: int, selected_seats: Sequence[str]
    ) -> Decimal:
        """Return base price times passengers plus a surcharge per first-class seat.

        The number of selected seats is not reconciled with passenger_count.

        Raises:
            PriceConfigurationError: If the flight has no positive base price.
            InvalidSeatError: If a selected seat is not part of the layout.
        """
        if flight.price is None or flight.price <= 0:
            raise PriceConfigurationError(flight.id.value)

        total = flight.price * passenger_count
        for seat_number in selected_seats:
            is_first_class = self._seat_service.is_seat_first_class(flight.id, seat_number)
            if is_first_class is None:
                raise InvalidSeatError(seat_number)
            if is_first_class:
                total += self._first_class_surcharge
        return total

    def create_booking(
        self, flight_id: str | int, passengers: int, selected_seats: Sequence[str]
    ) -> BookingConfirmation:
        """Price a booking and return its confirmation.

        Raises:
            InvalidFlightIdError: If the flight_id is not a positive integer.
            FlightNotFoundError: If the flight does not exist.
            PriceConfigurationError: If the flight has no positive base price.
            InvalidSeatError: If a selected seat is not part of the layout.
        """
        flight = self._flight_service.get_flight(flight_id)
        total_price = self.compute_booking_price(flight, passengers, selected_seats)
        with self._lock:
            booking_id = next(self._booking_ids)
        return BookingConfirmation(
            booking_id=booking_id,
            flight_id=flight.id,
            flight_number=flight.flight_number,
            passengers=passengers,
            confirmed_seats=tuple(selected_seats),
            total_price=total_price,
            booked_at=datetime.now(timezone.utc),
        )
