from rest_framework import serializers

from review.models import Review
from review.services import MAX_RATING, MIN_RATING


class ReviewCreateSerializer(serializers.Serializer):
    """Input of a review submission."""

    booking_id = serializers.IntegerField(min_value=1)
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ReviewSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    booking_id = serializers.IntegerField(read_only=True)
    hotel_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Review
        fields = ("id", "user_id", "booking_id", "hotel_id", "rating", "comment", "created_at")
        read_only_fields = fields
