from flights.handlers.views import BookingView, FlightDetailView, FlightListView, SeatMapView

__all__ = [
    "FlightListView",
    "FlightDetailView",
    "SeatMapView",
    "BookingView",
]
