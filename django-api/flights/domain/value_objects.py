"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self


@dataclass(frozen=True)
class FlightId:
    """Unique identifier for a Flight."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("FlightId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class SeatPreferences:
    """Passenger seat preferences. ``None`` and ``False`` both mean no preference."""

    window: bool | None = None
    extra_legroom: bool | None = None
    near_exit: bool | None = None


@dataclass(frozen=True)
class SeatLayout:
    """Static cabin layout shared by every flight."""

    total_rows: int
    columns: tuple[str, ...]
    exit_rows: frozenset[int]
    extra_legroom_rows: frozenset[int]
    first_class_last_row: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "exit_rows", frozenset(self.exit_rows))
        object.__setattr__(self, "extra_legroom_rows", frozenset(self.extra_legroom_rows))
        if self.total_rows <= 0:
            raise ValueError("Layout must have at least one row")
        if not self.columns:
            raise ValueError("Layout must have at least one column")
        if len(set(self.columns)) != len(self.columns):
            raise ValueError("Layout columns must be unique")
        for column in self.columns:
            if len(column) != 1 or not column.isalpha() or not column.isupper():
                raise ValueError(f"Invalid layout column: {column!r}")

    @property
    def window_columns(self) -> frozenset[str]:
        return frozenset({self.columns[0], self.columns[-1]})

    def column_index(self, column: str) -> int:
        return self.columns.index(column)


DEFAULT_LAYOUT = SeatLayout(
    total_rows=25,
    columns=("A", "B", "C", "D", "E", "F"),
    exit_rows=frozenset({1, 12, 24}),
    extra_legroom_rows=frozenset({10, 11, 12}),
    first_class_last_row=2,
)
