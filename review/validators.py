from booking.models import Booking
from booking.validators import start_of_day
from hotel_booking_service.exceptions import BookingNotEligible


def checkout_moment(booking):
    """Instant a stay ends: the start of its check-out day."""
    return start_of_day(booking.check_out_date)


def validate_booking_can_be_reviewed(booking, now):
    """
    Validate that the stay is over and was not cancelled.
    A review is accepted only strictly after the check-out moment.
    """
    if booking.status == Booking.BookingStatus.CANCELLED:
        raise BookingNotEligible(detail="Cancelled bookings cannot be reviewed.")

    if now <= checkout_moment(booking):
        raise BookingNotEligible(detail="Stay has not ended yet.")
