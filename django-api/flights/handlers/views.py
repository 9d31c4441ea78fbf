"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors raised by services are mapped to HTTP responses by
flights.handlers.errors.domain_exception_handler.
"""

from loguru import logger
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from flights.dependencies import get_booking_service, get_flight_service, get_seat_service
from flights.domain import SeatPreferences
from flights.handlers.serializers import (
    BookingConfirmationSerializer,
    BookingRequestSerializer,
    FlightSearchQuerySerializer,
    FlightSerializer,
    SeatMapQuerySerializer,
    SeatMapSerializer,
)


class FlightListView(APIView):
    """Handler for GET /api/flights"""

    def get(self, request: Request) -> Response:
        logger.info("Fetching all flights.")
        query = FlightSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        flights = get_flight_service().list_flights(
            destination=params.get("destination"),
            departure_date=params.get("date"),
            max_duration_minutes=params.get("maxDurationMinutes"),
            max_price=params.get("maxPrice"),
        )
        return Response(FlightSerializer(flights, many=True).data)


class FlightDetailView(APIView):
    """Handler for GET /api/flights/{flight_id}"""

    def get(self, request: Request, flight_id: str) -> Response:
        logger.info(f"Fetching single flight with an ID: {flight_id}.")
        flight = get_flight_service().get_flight(flight_id)
        return Response(FlightSerializer(flight).data)


class SeatMapView(APIView):
    """Handler for GET /api/flights/{flight_id}/seats"""

    def get(self, request: Request, flight_id: str) -> Response:
        logger.info(f"Fetching seat map for flight with an ID: {flight_id}.")
        query = SeatMapQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        flight = get_flight_service().get_flight(flight_id)
        seat_map = get_seat_service().get_seat_map(
            flight,
            party_size=params["numberOfPassengers"],
            preferences=SeatPreferences(
                window=params["preferWindow"],
                extra_legroom=params["preferExtraLegroom"],
                near_exit=params["preferNearExit"],
            ),
        )
        return Response(SeatMapSerializer(seat_map).data)


class BookingView(APIView):
    """Handler for POST /api/flights/bookings"""

    def post(self, request: Request) -> Response:
        logger.info("Creating booking request.")
        body = BookingRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        data = body.validated_data
        logger.debug(f"Booking request: {data}")

        booking = get_booking_service().create_booking(
            flight_id=data["flightId"],
            passengers=data["passengers"],
            selected_seats=data["selectedSeats"],
        )
        logger.info(f"Calculated price of the flight is {booking.total_price}")
        return Response(BookingConfirmationSerializer(booking).data)
