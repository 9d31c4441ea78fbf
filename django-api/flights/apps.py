from django.apps import AppConfig
from django.conf import settings


class FlightsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "flights"

    def ready(self) -> None:
        from flights.log_config import configure_logging

        configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
