"""Populate the database with sample flights and random seat occupancy."""

import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from flights.conf import get_seat_layout
from flights.domain import SeatLayout
from flights.models import Flight
from flights.services.seating import generate_seat_layout

DESTINATIONS = ["WAW", "RIX", "HEL", "ARN", "OSL"]
ORIGINS = ["TLL", "RIX"]
AIRCRAFT = ["Boeing 737", "Airbus A320", "ATR 72"]
DEFAULT_OCCUPANCY_RATE = 0.4


def random_occupied_seats(layout: SeatLayout, rate: float, rng: random.Random) -> list[str]:
    seat_numbers = [seat.seat_number for seat in generate_seat_layout(layout)]
    return rng.sample(seat_numbers, int(len(seat_numbers) * rate))


class Command(BaseCommand):
    help = "Create sample flights with randomly occupied seats."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=20)
        parser.add_argument("--occupancy", type=float, default=DEFAULT_OCCUPANCY_RATE)
        parser.add_argument("--seed", type=int, default=None, help="Random seed for occupancy")
        parser.add_argument("--clear", action="store_true", help="Delete existing flights first")

    @transaction.atomic
    def handle(self, *args, **options):
        if not 0 <= options["occupancy"] <= 1:
            raise CommandError("--occupancy must be between 0 and 1")

        layout = get_seat_layout()
        rng = random.Random(options["seed"])
        if options["clear"]:
            Flight.objects.all().delete()

        base_time = datetime(2025, 4, 1, 10, 30, tzinfo=timezone.utc)
        flights = []
        for i in range(options["count"]):
            departure = base_time + timedelta(days=i % 5, hours=i % 3)
            flights.append(
                Flight(
                    flight_number=f"FL{100 + i}",
                    origin=ORIGINS[i % len(ORIGINS)],
                    destination=DESTINATIONS[i % len(DESTINATIONS)],
                    departure_time=departure,
                    arrival_time=departure + timedelta(minutes=70 + (i * 3 % 55)),
                    price=Decimal("95.00") + Decimal("2.50") * i,
                    aircraft_type=AIRCRAFT[i % len(AIRCRAFT)],
                    occupied_seat_numbers=random_occupied_seats(layout, options["occupancy"], rng),
                )
            )

        flights.append(
            Flight(
                flight_number="BT123",
                origin="TLL",
                destination="WAW",
                departure_time=datetime(2025, 5, 10, 10, 0, tzinfo=timezone.utc),
                arrival_time=datetime(2025, 5, 10, 11, 30, tzinfo=timezone.utc),
                price=Decimal("150.00"),
                aircraft_type="Boeing 737",
                occupied_seat_numbers=random_occupied_seats(layout, options["occupancy"], rng),
            )
        )

        Flight.objects.bulk_create(flights)
        self.stdout.write(self.style.SUCCESS(f"Created {len(flights)} flights."))
