from datetime import datetime, time

from django.conf import settings
from django.utils import timezone

from booking.models import Booking
from hotel_booking_service.exceptions import (
    AlreadyCancelled,
    BookingAlreadyCompleted,
    CancellationDeadlinePassed,
    InvalidCapacity,
    InvalidDates,
)


def start_of_day(day):
    """Aware datetime of midnight at the beginning of `day`."""
    return timezone.make_aware(datetime.combine(day, time.min))


def end_of_day(day):
    """Aware datetime of the last instant of `day`."""
    return timezone.make_aware(datetime.combine(day, time.max))


def validate_guest_capacity(room, guests):
    """Validate that the room can host the requested number of guests."""
    if guests > room.max_occupancy:
        raise InvalidCapacity()


def validate_date_order(check_in_date, check_out_date):
    """Validate that check-out is strictly after check-in."""
    if check_out_date <= check_in_date:
        raise InvalidDates(detail="Check-out date must be after check-in date.")


def validate_check_in_not_past(check_in_date, today):
    """Validate that check-in is today or later."""
    if check_in_date < today:
        raise InvalidDates(detail="Check-in date cannot be in the past.")


def calculate_hours_to_checkin(booking, now):
    """
    Calculate hours remaining until the start of the check-in day.
    """
    return (start_of_day(booking.check_in_date) - now).total_seconds() / 3600


def is_late_cancellation(booking, now, hours_threshold=None):
    """
    Check if cancellation is considered "late" (within threshold of check-in).
    """
    if hours_threshold is None:
        hours_threshold = settings.CANCELLATION_DEADLINE_HOURS
    return calculate_hours_to_checkin(booking, now) < hours_threshold


def is_stay_completed(booking, now):
    """A stay is completed once its check-out day has fully elapsed."""
    return end_of_day(booking.check_out_date) < now


def validate_booking_can_cancel(booking, now):
    """Validate that booking can be cancelled."""
    if booking.status == Booking.BookingStatus.CANCELLED:
        raise AlreadyCancelled()

    if is_stay_completed(booking, now):
        raise BookingAlreadyCompleted()

    if is_late_cancellation(booking, now):
        raise CancellationDeadlinePassed()
