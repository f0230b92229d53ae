"""
Error kinds returned by the API and the exception handler that wraps
every response into the `{success, data, error}` envelope.
"""

import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class ServiceError(exceptions.APIException):
    """Base class for business errors raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be processed."
    default_code = "INVALID_REQUEST"


class InvalidRequest(ServiceError):
    default_detail = "Invalid request."
    default_code = "INVALID_REQUEST"


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required."
    default_code = "UNAUTHORIZED"


class InvalidCredentials(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid email or password."
    default_code = "INVALID_CREDENTIALS"


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You are not allowed to perform this action."
    default_code = "FORBIDDEN"


class EmailAlreadyExists(ServiceError):
    default_detail = "Email is already registered."
    default_code = "EMAIL_ALREADY_EXISTS"


class HotelNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Hotel not found."
    default_code = "HOTEL_NOT_FOUND"


class RoomNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Room not found."
    default_code = "ROOM_NOT_FOUND"


class RoomAlreadyExists(ServiceError):
    default_detail = "Room with this number already exists in the hotel."
    default_code = "ROOM_ALREADY_EXISTS"


class InvalidCapacity(ServiceError):
    default_detail = "Number of guests exceeds room capacity."
    default_code = "INVALID_CAPACITY"


class RoomNotAvailable(ServiceError):
    default_detail = "Room is not available for the selected dates."
    default_code = "ROOM_NOT_AVAILABLE"


class InvalidDates(ServiceError):
    default_detail = "Invalid booking dates."
    default_code = "INVALID_DATES"


class BookingNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Booking not found."
    default_code = "BOOKING_NOT_FOUND"


class AlreadyCancelled(ServiceError):
    default_detail = "Booking is already cancelled."
    default_code = "ALREADY_CANCELLED"


class BookingAlreadyCompleted(ServiceError):
    default_detail = "Completed stays cannot be cancelled."
    default_code = "BOOKING_ALREADY_COMPLETED"


class CancellationDeadlinePassed(ServiceError):
    default_detail = "Cancellation deadline has passed."
    default_code = "CANCELLATION_DEADLINE_PASSED"


class BookingNotCancellable(ServiceError):
    default_detail = "Booking can no longer be cancelled."
    default_code = "BOOKING_NOT_CANCELLABLE"


class BookingNotEligible(ServiceError):
    default_detail = "Booking is not eligible for a review."
    default_code = "BOOKING_NOT_ELIGIBLE"


class AlreadyReviewed(ServiceError):
    default_detail = "Booking has already been reviewed."
    default_code = "ALREADY_REVIEWED"


class HotelDataInvalid(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Hotel rating data is inconsistent."
    default_code = "HOTEL_DATA_INVALID"


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."
    default_code = "INTERNAL_SERVER_ERROR"


def envelope(data=None, success=True, error=None):
    """Build the body shared by every API response."""
    return {"success": success, "data": data, "error": error}


def _error_code(exc):
    if isinstance(exc, ServiceError):
        return exc.default_code
    if isinstance(exc, exceptions.ValidationError):
        return InvalidRequest.default_code
    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        return Unauthorized.default_code
    if isinstance(exc, exceptions.PermissionDenied):
        return Forbidden.default_code
    if isinstance(exc, exceptions.NotFound):
        return "NOT_FOUND"
    if isinstance(exc, exceptions.MethodNotAllowed):
        return "METHOD_NOT_ALLOWED"
    return InvalidRequest.default_code


def envelope_exception_handler(exc, context):
    """
    DRF exception handler.

    Known API errors keep their status code and are reported by code.
    Database and unexpected errors become INTERNAL_SERVER_ERROR without
    exposing their message to the caller.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            headers["Retry-After"] = str(int(exc.wait))
        return Response(
            envelope(success=False, error=_error_code(exc)),
            status=exc.status_code,
            headers=headers,
        )

    view = context.get("view")
    if isinstance(exc, DatabaseError):
        logger.exception(f"Storage failure in {view.__class__.__name__}: {exc}")
    else:
        logger.exception(f"Unexpected error in {view.__class__.__name__}: {exc}")
    return Response(
        envelope(success=False, error=InternalError.default_code),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
