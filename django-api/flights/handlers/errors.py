"""Map domain errors to HTTP responses."""

from loguru import logger
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from flights.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.FLIGHT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_FLIGHT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_SEAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PRICE_CONFIGURATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc, context):
    """DRF exception handler that also understands DomainError."""
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.error(f"Domain error: {exc}")
    else:
        logger.warning(f"Domain error: {exc}")
    return Response({"code": exc.code.value, "message": exc.message}, status=status_code)
