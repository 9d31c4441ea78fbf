"""Integration tests for the flight API.

These validate the HTTP contract over the Django ORM store.
Run with: pytest tests/test_flight_api.py -v
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from flights.models import Flight


def create_flight(**overrides) -> Flight:
    departure = overrides.pop(
        "departure_time", datetime(2025, 5, 10, 10, 0, tzinfo=timezone.utc)
    )
    fields = dict(
        flight_number="BT123",
        origin="TLL",
        destination="WAW",
        departure_time=departure,
        arrival_time=departure + timedelta(minutes=90),
        price=Decimal("150.00"),
        aircraft_type="Boeing 737",
        occupied_seat_numbers=[],
    )
    fields.update(overrides)
    return Flight.objects.create(**fields)


@pytest.mark.django_db
class TestFlightList:
    """Tests for GET /api/flights"""

    def test_list_flights_returns_all(self, api_client: APIClient):
        """Given flights exist, returns all of them."""
        create_flight()
        create_flight(flight_number="FL101", destination="HEL")
        response = api_client.get("/api/flights")
        assert response.status_code == 200
        assert [f["flightNr"] for f in response.json()] == ["BT123", "FL101"]

    def test_list_flights_empty_catalog(self, api_client: APIClient):
        """Given no flights, returns empty list."""
        response = api_client.get("/api/flights")
        assert response.status_code == 200
        assert response.json() == []

    def test_filter_by_destination_ignores_case(self, api_client: APIClient):
        """Destination filter is case-insensitive."""
        create_flight()
        create_flight(flight_number="FL101", destination="HEL")
        response = api_client.get("/api/flights", {"destination": "hel"})
        assert [f["flightNr"] for f in response.json()] == ["FL101"]

    def test_filter_by_date_duration_and_price(self, api_client: APIClient):
        """Date, duration and price filters combine."""
        create_flight()
        create_flight(
            flight_number="FL102",
            arrival_time=datetime(2025, 5, 10, 13, 0, tzinfo=timezone.utc),
        )
        create_flight(flight_number="FL103", price=Decimal("300.00"))
        create_flight(
            flight_number="FL104",
            departure_time=datetime(2025, 5, 11, 10, 0, tzinfo=timezone.utc),
        )
        response = api_client.get(
            "/api/flights",
            {"date": "2025-05-10", "maxDurationMinutes": 120, "maxPrice": "200"},
        )
        assert response.status_code == 200
        assert [f["flightNr"] for f in response.json()] == ["BT123"]

    def test_invalid_filter_returns_400(self, api_client: APIClient):
        """Malformed query parameters are rejected."""
        response = api_client.get("/api/flights", {"date": "tomorrow"})
        assert response.status_code == 400

    def test_oversized_duration_filter_returns_400(self, api_client: APIClient):
        """A duration beyond the accepted range is rejected, not a server error."""
        response = api_client.get("/api/flights", {"maxDurationMinutes": 10**16})
        assert response.status_code == 400
        assert "maxDurationMinutes" in response.json()

    def test_unknown_long_destination_returns_empty_list(self, api_client: APIClient):
        """A full city name is a valid search that simply matches nothing."""
        create_flight()
        response = api_client.get("/api/flights", {"destination": "Warsaw"})
        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.django_db
class TestFlightDetail:
    """Tests for GET /api/flights/{id}"""

    def test_get_flight_returns_details(self, api_client: APIClient):
        """Given flight exists, returns flight details."""
        flight = create_flight()
        response = api_client.get(f"/api/flights/{flight.pk}")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == flight.pk
        assert body["flightNr"] == "BT123"
        assert body["price"] == "150.00"
        assert body["durationMinutes"] == 90

    def test_get_flight_not_found(self, api_client: APIClient):
        """Given flight does not exist, returns 404."""
        response = api_client.get("/api/flights/999")
        assert response.status_code == 404
        assert response.json()["code"] == "FLIGHT_NOT_FOUND"

    def test_get_flight_invalid_id_format(self, api_client: APIClient):
        """Given a non-numeric id, returns 400."""
        response = api_client.get("/api/flights/abc")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_FLIGHT_ID"


@pytest.mark.django_db
class TestSeatMap:
    """Tests for GET /api/flights/{id}/seats"""

    def test_seat_map_shape(self, api_client: APIClient):
        """Returns every seat, the layout and a default single-seat recommendation."""
        flight = create_flight(occupied_seat_numbers=["1A", "12F"])
        response = api_client.get(f"/api/flights/{flight.pk}/seats")
        assert response.status_code == 200
        body = response.json()
        assert body["totalRows"] == 25
        assert body["columns"] == ["A", "B", "C", "D", "E", "F"]
        assert len(body["allSeats"]) == 150
        assert body["recommendedSeatNrs"] == ["1B"]
        seat = next(s for s in body["allSeats"] if s["seatNr"] == "12F")
        assert seat == {
            "seatNr": "12F",
            "row": 12,
            "column": "F",
            "isWindow": True,
            "hasExtraLegroom": True,
            "isNearExit": True,
            "isOccupied": True,
            "isFirstClass": False,
        }

    def test_recommendation_with_preferences(self, api_client: APIClient):
        """Preferences and party size shape the recommendation."""
        flight = create_flight(occupied_seat_numbers=["10A"])
        response = api_client.get(
            f"/api/flights/{flight.pk}/seats",
            {"numberOfPassengers": 3, "preferExtraLegroom": "true"},
        )
        assert response.json()["recommendedSeatNrs"] == ["10B", "10C", "10D"]

    def test_no_recommendation_is_not_an_error(self, api_client: APIClient):
        """An unsatisfiable request returns 200 with an empty recommendation."""
        flight = create_flight()
        response = api_client.get(
            f"/api/flights/{flight.pk}/seats",
            {"numberOfPassengers": 2, "preferWindow": "true"},
        )
        assert response.status_code == 200
        assert response.json()["recommendedSeatNrs"] == []

    def test_seat_map_flight_not_found(self, api_client: APIClient):
        """Given flight does not exist, returns 404."""
        response = api_client.get("/api/flights/999/seats")
        assert response.status_code == 404


@pytest.mark.django_db
class TestBooking:
    """Tests for POST /api/flights/bookings"""

    def test_booking_with_first_class_surcharge(self, api_client: APIClient):
        """Total is base price times passengers plus the first-class surcharge."""
        flight = create_flight(price=Decimal("100.00"))
        response = api_client.post(
            "/api/flights/bookings",
            {"flightId": flight.pk, "passengers": 2, "selectedSeats": ["1A", "5B"]},
            format="json",
        )
        assert response.status_code == 200
        body = response.json()
        assert body["bookingId"] == 1
        assert body["flightId"] == flight.pk
        assert body["flightNumber"] == "BT123"
        assert body["passengers"] == 2
        assert body["confirmedSeats"] == ["1A", "5B"]
        assert body["totalPrice"] == "250.00"
        assert body["bookingTime"]

    def test_booking_invalid_seat(self, api_client: APIClient):
        """An unknown seat returns 400 naming the seat."""
        flight = create_flight()
        response = api_client.post(
            "/api/flights/bookings",
            {"flightId": flight.pk, "passengers": 1, "selectedSeats": ["77Q"]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_SEAT"
        assert "77Q" in response.json()["message"]

    def test_booking_invalid_price_configuration(self, api_client: APIClient):
        """A flight without a price returns a server error."""
        flight = create_flight(price=None)
        response = api_client.post(
            "/api/flights/bookings",
            {"flightId": flight.pk, "passengers": 1, "selectedSeats": ["5A"]},
            format="json",
        )
        assert response.status_code == 500
        assert response.json()["code"] == "PRICE_CONFIGURATION"

    def test_booking_flight_not_found(self, api_client: APIClient):
        """Booking a missing flight returns 404."""
        response = api_client.post(
            "/api/flights/bookings",
            {"flightId": 999, "passengers": 1, "selectedSeats": ["5A"]},
            format="json",
        )
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "payload",
        [
            {"passengers": 1, "selectedSeats": ["5A"]},
            {"flightId": 1, "passengers": 0, "selectedSeats": ["5A"]},
            {"flightId": 1, "passengers": 1, "selectedSeats": []},
        ],
    )
    def test_booking_rejects_malformed_request(self, api_client: APIClient, payload):
        """Missing flight id, zero passengers or no seats are rejected."""
        response = api_client.post("/api/flights/bookings", payload, format="json")
        assert response.status_code == 400
