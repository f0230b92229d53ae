from django.conf import settings
from django.db import models


class Hotel(models.Model):
    """
    Hotel listed by an owner.
    `rating` and `total_reviews` form the running review aggregate and are
    written only by the review rating aggregator.
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="hotels"
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    city = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    amenities = models.JSONField(default=list, blank=True)
    rating = models.FloatField(null=True, blank=True)
    total_reviews = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Meta configuration for Hotel model."""
        ordering = ("id",)
        indexes = [
            models.Index(fields=["city", "country"], name="hotel_city_country_idx"),
        ]

    def __str__(self):
        return f"{self.name} - {self.city}"
