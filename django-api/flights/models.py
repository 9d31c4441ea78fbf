"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Flight(models.Model):
    """Persistence model for flights."""

    flight_number = models.CharField(max_length=16)
    origin = models.CharField(max_length=3)
    destination = models.CharField(max_length=3)
    departure_time = models.DateTimeField()
    arrival_time = models.DateTimeField()
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    aircraft_type = models.CharField(max_length=64)
    occupied_seat_numbers = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["departure_time", "id"]
        indexes = [
            models.Index(fields=["destination", "departure_time"], name="flight_dest_departure_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.flight_number} {self.origin}-{self.destination}"
