from booking.models import Booking
from room.models import Room


class BookingStorage:
    """
    Data access used by the booking lifecycle.

    Services receive an instance at construction, so tests and other
    callers can substitute their own implementation.
    """

    def find_room(self, room_id, for_update=False):
        """Return the room or None. `for_update` locks the row until commit."""
        queryset = Room.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        return queryset.filter(pk=room_id).first()

    def find_bookings_by_room(self, room_id, statuses=None):
        queryset = Booking.objects.filter(room_id=room_id)
        if statuses is not None:
            queryset = queryset.filter(status__in=statuses)
        return list(queryset.only("id", "check_in_date", "check_out_date", "status"))

    def create_booking(self, **fields):
        return Booking.objects.create(**fields)

    def find_booking_by_id(self, booking_id):
        return Booking.objects.filter(pk=booking_id).first()

    def conditional_update_booking_status(
        self, booking_id, expected_status, new_status, cancelled_at
    ) -> int:
        """
        Change status only if the stored status still equals `expected_status`.
        Returns the number of updated rows (0 or 1).
        """
        return Booking.objects.filter(pk=booking_id, status=expected_status).update(
            status=new_status, cancelled_at=cancelled_at
        )

    def list_bookings_for_user(self, user_id, status=None):
        queryset = Booking.objects.select_related("room", "hotel").filter(user_id=user_id)
        if status:
            queryset = queryset.filter(status=status)
        return queryset
