from django.urls import path

from flights.handlers import BookingView, FlightDetailView, FlightListView, SeatMapView

urlpatterns = [
    path("flights", FlightListView.as_view(), name="flight-list"),
    path("flights/bookings", BookingView.as_view(), name="booking-create"),
    path("flights/<str:flight_id>", FlightDetailView.as_view(), name="flight-detail"),
    path("flights/<str:flight_id>/seats", SeatMapView.as_view(), name="seat-map"),
]
