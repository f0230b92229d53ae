from django.conf import settings
from django.db import models
from django.db.models import F, ForeignKey, Q

from hotel.models import Hotel
from room.models import Room


class Booking(models.Model):
    """
    Hotel room booking model.
    Represents a reservation of a room by a customer for the half-open
    date range [check_in_date, check_out_date).
    """
    class BookingStatus(models.TextChoices):
        """Enumeration of possible booking statuses."""
        CONFIRMED = "confirmed"
        CANCELLED = "cancelled"

    room = ForeignKey(Room, on_delete=models.CASCADE, related_name="bookings")
    hotel = ForeignKey(Hotel, on_delete=models.CASCADE, related_name="bookings")
    user = ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="bookings"
    )
    check_in_date = models.DateField()
    check_out_date = models.DateField()
    guests = models.PositiveIntegerField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        choices=BookingStatus.choices,
        max_length=20,
        default=BookingStatus.CONFIRMED,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Meta configuration for Booking model."""
        ordering = ("-created_at", "-id")
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out_date__gt=F("check_in_date")),
                name="check_out_after_check_in",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "status"], name="booking_room_status_idx"),
        ]

    def __str__(self):
        return f"Booking {self.id} of room {self.room_id} by user {self.user_id}"

    @property
    def is_cancelled(self):
        return self.status == self.BookingStatus.CANCELLED
