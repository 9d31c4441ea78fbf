from django.contrib import admin

from flights.models import Flight


@admin.register(Flight)
class FlightAdmin(admin.ModelAdmin):
    list_display = ["flight_number", "origin", "destination", "departure_time", "price"]
    list_filter = ["destination", "aircraft_type"]
    search_fields = ["flight_number", "origin", "destination"]
