from django.conf import settings
from django.db import models
from django.db.models import ForeignKey, Q

from booking.models import Booking
from hotel.models import Hotel


class Review(models.Model):
    """
    Guest review of a finished stay.
    One review per (user, booking) pair; `hotel` is copied from the booking.
    """

    user = ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews"
    )
    booking = ForeignKey(Booking, on_delete=models.CASCADE, related_name="reviews")
    hotel = ForeignKey(Hotel, on_delete=models.CASCADE, related_name="reviews")
    rating = models.PositiveSmallIntegerField()
    comment = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Meta configuration for Review model."""
        ordering = ("-created_at", "-id")
        constraints = [
            models.UniqueConstraint(
                fields=("user", "booking"), name="unique_review_per_booking"
            ),
            models.CheckConstraint(
                condition=Q(rating__gte=1) & Q(rating__lte=5),
                name="review_rating_range",
            ),
        ]

    def __str__(self):
        return f"Review {self.id} of hotel {self.hotel_id} by user {self.user_id}"
