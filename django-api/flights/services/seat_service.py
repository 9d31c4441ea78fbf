"""Seat map service - builds seat maps and answers seat classification queries."""

from flights.domain.models import Flight, SeatMap
from flights.domain.value_objects import FlightId, SeatLayout, SeatPreferences
from flights.services.seating import generate_seat_layout, recommend_seats


class SeatService:
    """Service for seat map and seat classification operations."""

    def __init__(self, layout: SeatLayout) -> None:
        self._layout = layout

    def get_seat_map(
        self,
        flight: Flight,
        party_size: int = 1,
        preferences: SeatPreferences | None = None,
    ) -> SeatMap:
        """Return the full seat map of a flight with a recommended block.

        An empty recommendation is a normal outcome, not an error.
        """
        seats = generate_seat_layout(self._layout, flight.occupied_seat_numbers)
        free_seats = [seat for seat in seats if not seat.is_occupied]
        recommended = recommend_seats(self._layout, free_seats, party_size, preferences)
        return SeatMap(
            total_rows=self._layout.total_rows,
            columns=self._layout.columns,
            seats=tuple(seats),
            recommended_seat_numbers=tuple(seat.seat_number for seat in recommended),
        )

    def is_seat_first_class(self, flight_id: FlightId, seat_number: str) -> bool | None:
        """Return whether a seat is first class, or None if the flight has no such seat.

        Every flight shares the same layout, so the answer does not depend on
        the flight's occupancy.
        """
        for seat in generate_seat_layout(self._layout):
            if seat.seat_number == seat_number:
                return seat.is_first_class
        return None
