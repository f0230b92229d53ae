import logging
from datetime import datetime
from decimal import Decimal

from django.db import IntegrityError, transaction
from django.utils import timezone

from booking.models import Booking
from booking.signals import booking_cancelled
from booking.storage import BookingStorage
from booking.validators import (
    validate_booking_can_cancel,
    validate_check_in_not_past,
    validate_date_order,
    validate_guest_capacity,
)
from hotel_booking_service.exceptions import (
    BookingNotCancellable,
    BookingNotFound,
    RoomNotAvailable,
    RoomNotFound,
)
from user.policies import can_book, can_manage_booking, enforce

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class InvalidRange(ValueError):
    """Raised when a stay does not span at least one night."""


def ranges_overlap(first_start, first_end, second_start, second_end):
    """
    Half-open interval intersection of [first_start, first_end) and
    [second_start, second_end). Ranges that only touch do not overlap.
    """
    return first_start < second_end and first_end > second_start


def is_room_available(storage, room_id, check_in_date, check_out_date):
    """Return True if no confirmed booking of the room overlaps the range."""
    bookings = storage.find_bookings_by_room(
        room_id, statuses=[Booking.BookingStatus.CONFIRMED]
    )
    return not any(
        ranges_overlap(
            booking.check_in_date,
            booking.check_out_date,
            check_in_date,
            check_out_date,
        )
        for booking in bookings
    )


def _as_date(value):
    return value.date() if isinstance(value, datetime) else value


def count_nights(check_in, check_out) -> int:
    return (_as_date(check_out) - _as_date(check_in)).days


def compute_price(price_per_night, check_in, check_out) -> Decimal:
    """Total price of the stay: whole nights times the nightly rate."""
    nights = count_nights(check_in, check_out)
    if nights <= 0:
        raise InvalidRange(f"Stay must last at least one night, got {nights}")
    return (Decimal(price_per_night) * nights).quantize(CENTS)


class BookingService:
    """
    Booking lifecycle: creation with availability and price checks,
    and the one-way transition from confirmed to cancelled.
    """

    def __init__(self, storage=None, clock=timezone.now):
        self.storage = storage or BookingStorage()
        self.clock = clock

    def today(self):
        return timezone.localtime(self.clock()).date()

    def create_booking(self, user, room_id, check_in_date, check_out_date, guests):
        """
        Create a confirmed booking.

        The room row stays locked from the availability check until the
        booking is written, so overlapping requests for the same room are
        processed one after another.
        """
        enforce(can_book(user.role))

        try:
            with transaction.atomic():
                room = self.storage.find_room(room_id, for_update=True)
                if room is None:
                    raise RoomNotFound()

                validate_guest_capacity(room, guests)
                validate_date_order(check_in_date, check_out_date)

                if not is_room_available(
                    self.storage, room.id, check_in_date, check_out_date
                ):
                    raise RoomNotAvailable()

                validate_check_in_not_past(check_in_date, self.today())

                booking = self.storage.create_booking(
                    user_id=user.id,
                    room_id=room.id,
                    hotel_id=room.hotel_id,
                    check_in_date=check_in_date,
                    check_out_date=check_out_date,
                    guests=guests,
                    total_price=compute_price(
                        room.price_per_night, check_in_date, check_out_date
                    ),
                    status=Booking.BookingStatus.CONFIRMED,
                )
        except IntegrityError as e:
            if not is_room_available(self.storage, room_id, check_in_date, check_out_date):
                logger.warning(f"Booking for room {room_id} lost a race for its dates: {e}")
                raise RoomNotAvailable()
            logger.error(f"Booking for room {room_id} rejected by storage: {e}")
            raise

        logger.info(
            f"Booking {booking.id} created for room {room_id} by user {user.id} "
            f"({check_in_date} - {check_out_date}, total {booking.total_price})"
        )
        return booking

    def cancel_booking(self, user, booking_id):
        """Cancel a confirmed booking of the calling customer."""
        enforce(can_book(user.role))

        booking = self.storage.find_booking_by_id(booking_id)
        if booking is None:
            raise BookingNotFound()

        enforce(can_manage_booking(user.role, booking.user_id, user.id))

        now = self.clock()
        validate_booking_can_cancel(booking, now)

        updated = self.storage.conditional_update_booking_status(
            booking.id,
            expected_status=Booking.BookingStatus.CONFIRMED,
            new_status=Booking.BookingStatus.CANCELLED,
            cancelled_at=now,
        )
        if not updated:
            logger.warning(f"Booking {booking.id} changed before it could be cancelled")
            raise BookingNotCancellable()

        booking.status = Booking.BookingStatus.CANCELLED
        booking.cancelled_at = now
        booking_cancelled.send(sender=Booking, instance=booking)

        logger.info(f"Booking {booking.id} cancelled by user {user.id}")
        return booking

    def list_bookings(self, user, status=None):
        """Return the calling customer's bookings, optionally by status."""
        enforce(can_book(user.role))
        return self.storage.list_bookings_for_user(user.id, status=status)
