"""Read flight planner configuration from Django settings."""

from decimal import Decimal

from django.conf import settings

from flights.domain.value_objects import DEFAULT_LAYOUT, Money, SeatLayout

DEFAULT_FIRST_CLASS_SURCHARGE = Decimal("50.00")


def get_seat_layout() -> SeatLayout:
    """Build the cabin layout from ``settings.SEAT_LAYOUT``, falling back to the default."""
    config = getattr(settings, "SEAT_LAYOUT", None)
    if not config:
        return DEFAULT_LAYOUT
    return SeatLayout(
        total_rows=int(config.get("total_rows", DEFAULT_LAYOUT.total_rows)),
        columns=tuple(config.get("columns", DEFAULT_LAYOUT.columns)),
        exit_rows=frozenset(config.get("exit_rows", DEFAULT_LAYOUT.exit_rows)),
        extra_legroom_rows=frozenset(
            config.get("extra_legroom_rows", DEFAULT_LAYOUT.extra_legroom_rows)
        ),
        first_class_last_row=int(
            config.get("first_class_last_row", DEFAULT_LAYOUT.first_class_last_row)
        ),
    )


def get_first_class_surcharge() -> Decimal:
    surcharge = getattr(settings, "FIRST_CLASS_SURCHARGE", DEFAULT_FIRST_CLASS_SURCHARGE)
    return Money(Decimal(str(surcharge))).amount
