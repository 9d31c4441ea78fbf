"""Serializers for request parsing and for transforming domain models to API responses."""

from rest_framework import serializers

# One week.
MAX_DURATION_MINUTES = 7 * 24 * 60


class FlightSearchQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/flights."""

    destination = serializers.CharField(required=False)
    date = serializers.DateField(required=False)
    maxDurationMinutes = serializers.IntegerField(
        required=False, min_value=0, max_value=MAX_DURATION_MINUTES
    )
    maxPrice = serializers.DecimalField(
        required=False, max_digits=10, decimal_places=2, min_value=0
    )


class SeatMapQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/flights/{flight_id}/seats."""

    numberOfPassengers = serializers.IntegerField(required=False, default=1)
    preferWindow = serializers.BooleanField(required=False, allow_null=True, default=None)
    preferExtraLegroom = serializers.BooleanField(required=False, allow_null=True, default=None)
    preferNearExit = serializers.BooleanField(required=False, allow_null=True, default=None)


class BookingRequestSerializer(serializers.Serializer):
    """Body of POST /api/flights/bookings."""

    flightId = serializers.IntegerField(
        error_messages={"null": "Flight ID cannot be null", "required": "Flight ID cannot be null"}
    )
    passengers = serializers.IntegerField(
        min_value=1, error_messages={"min_value": "Number of passengers must be at least 1"}
    )
    selectedSeats = serializers.ListField(
        child=serializers.CharField(max_length=8),
        allow_empty=False,
        error_messages={"empty": "At least one seat must be selected"},
    )


class FlightSerializer(serializers.Serializer):
    """Serializer for Flight domain model."""

    id = serializers.IntegerField(source="id.value")
    flightNr = serializers.CharField(source="flight_number")
    origin = serializers.CharField()
    destination = serializers.CharField()
    departureTime = serializers.DateTimeField(source="departure_time")
    arrivalTime = serializers.DateTimeField(source="arrival_time")
    durationMinutes = serializers.SerializerMethodField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    aircraftType = serializers.CharField(source="aircraft_type")

    def get_durationMinutes(self, flight) -> int:
        return int(flight.duration.total_seconds() // 60)


class SeatSerializer(serializers.Serializer):
    """Serializer for Seat domain model."""

    seatNr = serializers.CharField(source="seat_number")
    row = serializers.IntegerField()
    column = serializers.CharField()
    isWindow = serializers.BooleanField(source="is_window")
    hasExtraLegroom = serializers.BooleanField(source="has_extra_legroom")
    isNearExit = serializers.BooleanField(source="is_near_exit")
    isOccupied = serializers.BooleanField(source="is_occupied")
    isFirstClass = serializers.BooleanField(source="is_first_class")


class SeatMapSerializer(serializers.Serializer):
    """Serializer for SeatMap domain model."""

    totalRows = serializers.IntegerField(source="total_rows")
    columns = serializers.ListField(child=serializers.CharField())
    allSeats = SeatSerializer(source="seats", many=True)
    recommendedSeatNrs = serializers.ListField(
        source="recommended_seat_numbers", child=serializers.CharField()
    )


class BookingConfirmationSerializer(serializers.Serializer):
    """Serializer for BookingConfirmation domain model."""

    bookingId = serializers.IntegerField(source="booking_id")
    flightId = serializers.IntegerField(source="flight_id.value")
    flightNumber = serializers.CharField(source="flight_number")
    passengers = serializers.IntegerField()
    confirmedSeats = serializers.ListField(source="confirmed_seats", child=serializers.CharField())
    totalPrice = serializers.DecimalField(source="total_price", max_digits=12, decimal_places=2)
    bookingTime = serializers.DateTimeField(source="booked_at")
