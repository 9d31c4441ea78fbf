"""Seat grid construction and block recommendation.

Pure functions over a SeatLayout:
- classify_seat derives the static attributes of one cell
- generate_seat_layout builds the full ordered grid for an occupancy snapshot
- recommend_seats picks a contiguous block of free seats for a party
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache

from flights.domain.models import Seat
from flights.domain.value_objects import SeatLayout, SeatPreferences


@dataclass(frozen=True)
class SeatAttributes:
    """Attributes of a seat that depend only on its position."""

    is_window: bool
    has_extra_legroom: bool
    is_near_exit: bool
    is_first_class: bool


@lru_cache(maxsize=4096)
def classify_seat(layout: SeatLayout, row: int, column: str) -> SeatAttributes:
    return SeatAttributes(
        is_window=column in layout.window_columns,
        has_extra_legroom=row in layout.extra_legroom_rows,
        is_near_exit=row in layout.exit_rows,
        is_first_class=row <= layout.first_class_last_row,
    )


def seat_number(row: int, column: str) -> str:
    return f"{row}{column}"


def generate_seat_layout(layout: SeatLayout, occupied: Iterable[str] = ()) -> list[Seat]:
    """Return every seat of the layout, row by row in configured column order.

    Occupied identifiers that match no seat are ignored.
    """
    occupied_snapshot = frozenset(occupied)
    seats = []
    for row in range(1, layout.total_rows + 1):
        for column in layout.columns:
            number = seat_number(row, column)
            attributes = classify_seat(layout, row, column)
            seats.append(
                Seat(
                    seat_number=number,
                    row=row,
                    column=column,
                    is_window=attributes.is_window,
                    has_extra_legroom=attributes.has_extra_legroom,
                    is_near_exit=attributes.is_near_exit,
                    is_first_class=attributes.is_first_class,
                    is_occupied=number in occupied_snapshot,
                )
            )
    return seats


def _matches(seat: Seat, preferences: SeatPreferences) -> bool:
    if preferences.window and not seat.is_window:
        return False
    if preferences.extra_legroom and not seat.has_extra_legroom:
        return False
    if preferences.near_exit and not seat.is_near_exit:
        return False
    return True


def _is_contiguous(layout: SeatLayout, seats: Sequence[Seat]) -> bool:
    indexes = [layout.column_index(seat.column) for seat in seats]
    return all(b == a + 1 for a, b in zip(indexes, indexes[1:]))


def recommend_seats(
    layout: SeatLayout,
    free_seats: Sequence[Seat],
    party_size: int,
    preferences: SeatPreferences | None = None,
) -> list[Seat]:
    """Find the first contiguous block of ``party_size`` seats.

    Rows are scanned front to back and each row left to right. A party of one
    gets the first matching seat. Larger parties are never split across rows
    or gaps; if no block fits, the result is empty.
    """
    if party_size <= 0:
        party_size = 1
    preferences = preferences or SeatPreferences()

    candidates = [seat for seat in free_seats if _matches(seat, preferences)]
    if not candidates:
        return []

    seats_by_row: dict[int, list[Seat]] = {}
    for seat in candidates:
        seats_by_row.setdefault(seat.row, []).append(seat)

    for row in sorted(seats_by_row):
        row_seats = sorted(seats_by_row[row], key=lambda s: layout.column_index(s.column))
        if len(row_seats) < party_size:
            continue
        for start in range(len(row_seats) - party_size + 1):
            window = row_seats[start:start + party_size]
            if _is_contiguous(layout, window):
                return window

    if party_size == 1:
        return [min(candidates, key=lambda s: (s.row, layout.column_index(s.column)))]
    return []
