from django.db import models
from django.db.models import ForeignKey, Q

from hotel.models import Hotel


class Room(models.Model):
    """
    Bookable hotel room.
    Room numbers are unique within a hotel.
    """

    hotel = ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    number = models.CharField(max_length=20)
    type = models.CharField(max_length=50)
    price_per_night = models.DecimalField(max_digits=10, decimal_places=2)
    max_occupancy = models.PositiveIntegerField()

    class Meta:
        """Meta configuration for Room model."""
        ordering = ("id",)
        constraints = [
            models.UniqueConstraint(
                fields=("hotel", "number"), name="unique_room_number_per_hotel"
            ),
            models.CheckConstraint(
                condition=Q(price_per_night__gt=0), name="room_price_positive"
            ),
            models.CheckConstraint(
                condition=Q(max_occupancy__gt=0), name="room_occupancy_positive"
            ),
        ]

    def __str__(self):
        return f"Room {self.number} ({self.type})"
