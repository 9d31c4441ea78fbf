"""Domain error codes for the flights module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    FLIGHT_NOT_FOUND = "FLIGHT_NOT_FOUND"
    INVALID_FLIGHT_ID = "INVALID_FLIGHT_ID"
    INVALID_SEAT = "INVALID_SEAT"
    PRICE_CONFIGURATION = "PRICE_CONFIGURATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class FlightNotFoundError(DomainError):
    """Raised when a flight is not found."""

    def __init__(self, flight_id: str) -> None:
        super().__init__(
            code=ErrorCode.FLIGHT_NOT_FOUND,
            message=f"Flight not found with ID: {flight_id}",
        )
        self.flight_id = flight_id


class InvalidFlightIdError(DomainError):
    """Raised when a flight ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FLIGHT_ID,
            message="Invalid flight ID format",
        )


class InvalidSeatError(DomainError):
    """Raised when a selected seat does not exist in the flight's layout."""

    def __init__(self, seat_number: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SEAT,
            message=f"Invalid seat number selected: {seat_number}",
        )
        self.seat_number = seat_number


class PriceConfigurationError(DomainError):
    """Raised when a flight's base price is missing or not positive.

    This is a data-integrity fault in the flight record, not a user error.
    """

    def __init__(self, flight_id: int) -> None:
        super().__init__(
            code=ErrorCode.PRICE_CONFIGURATION,
            message="Cannot process booking due to invalid flight price configuration.",
        )
        self.flight_id = flight_id
