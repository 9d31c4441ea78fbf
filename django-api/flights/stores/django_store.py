"""Django ORM implementation of the FlightStore."""

from datetime import timedelta

from django.db.models import DurationField, ExpressionWrapper, F

from flights import models
from flights.domain import Flight, FlightId
from flights.stores.interfaces import FlightSearchCriteria, FlightStore


def to_domain(record: models.Flight) -> Flight:
    return Flight(
        id=FlightId(record.pk),
        flight_number=record.flight_number,
        origin=record.origin,
        destination=record.destination,
        departure_time=record.departure_time,
        arrival_time=record.arrival_time,
        price=record.price,
        aircraft_type=record.aircraft_type,
        occupied_seat_numbers=frozenset(record.occupied_seat_numbers or ()),
    )


class DjangoFlightStore(FlightStore):
    """Database-backed flight store using Django ORM."""

    def list_flights(self, criteria: FlightSearchCriteria) -> list[Flight]:
        queryset = models.Flight.objects.all()
        if criteria.destination is not None:
            queryset = queryset.filter(destination__iexact=criteria.destination)
        if criteria.departure_date is not None:
            queryset = queryset.filter(departure_time__date=criteria.departure_date)
        if criteria.max_duration_minutes is not None:
            queryset = queryset.annotate(
                duration=ExpressionWrapper(
                    F("arrival_time") - F("departure_time"), output_field=DurationField()
                )
            ).filter(duration__lte=timedelta(minutes=criteria.max_duration_minutes))
        if criteria.max_price is not None:
            queryset = queryset.filter(price__lte=criteria.max_price)
        return [to_domain(record) for record in queryset]

    def get_flight(self, flight_id: FlightId) -> Flight | None:
        record = models.Flight.objects.filter(pk=flight_id.value).first()
        if record is None:
            return None
        return to_domain(record)
