"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from flights.domain import DEFAULT_LAYOUT, Flight, FlightId
from flights.services.booking_service import BookingService
from flights.services.flight_service import FlightService
from flights.services.seat_service import SeatService
from flights.stores.memory_store import InMemoryFlightStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_booking_service():
    from flights.dependencies import get_booking_service

    get_booking_service.cache_clear()
    yield
    get_booking_service.cache_clear()


def make_flight(
    flight_id: int = 1,
    price: Decimal | None = Decimal("100.00"),
    occupied: frozenset[str] = frozenset(),
    **overrides,
) -> Flight:
    fields = dict(
        id=FlightId(flight_id),
        flight_number=f"FL{100 + flight_id}",
        origin="TLL",
        destination="WAW",
        departure_time=datetime(2025, 4, 1, 10, 30, tzinfo=timezone.utc),
        arrival_time=datetime(2025, 4, 1, 11, 40, tzinfo=timezone.utc),
        price=price,
        aircraft_type="Boeing 737",
        occupied_seat_numbers=occupied,
    )
    fields.update(overrides)
    return Flight(**fields)


@pytest.fixture
def flight_factory():
    return make_flight


@pytest.fixture
def flight_store() -> InMemoryFlightStore:
    return InMemoryFlightStore([make_flight()])


@pytest.fixture
def seat_service() -> SeatService:
    return SeatService(DEFAULT_LAYOUT)


@pytest.fixture
def flight_service(flight_store: InMemoryFlightStore) -> FlightService:
    return FlightService(flight_store)


@pytest.fixture
def booking_service(flight_service: FlightService, seat_service: SeatService) -> BookingService:
    return BookingService(flight_service, seat_service, first_class_surcharge=Decimal("50"))
