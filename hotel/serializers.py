from rest_framework import serializers

from hotel.models import Hotel
from room.serializers import RoomSerializer


class HotelSerializer(serializers.ModelSerializer):
    """Serializer for creating and returning a hotel."""

    owner_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(min_length=2, max_length=255)
    city = serializers.CharField(min_length=2, max_length=100)
    country = serializers.CharField(min_length=2, max_length=100)
    amenities = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )

    class Meta:
        model = Hotel
        fields = (
            "id",
            "owner_id",
            "name",
            "description",
            "city",
            "country",
            "amenities",
            "rating",
            "total_reviews",
        )
        read_only_fields = ("id", "owner_id", "rating", "total_reviews")


class HotelListSerializer(serializers.ModelSerializer):
    """Hotel search result with the cheapest nightly price."""

    min_price_per_night = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True, allow_null=True
    )

    class Meta:
        model = Hotel
        fields = (
            "id",
            "name",
            "description",
            "city",
            "country",
            "amenities",
            "rating",
            "total_reviews",
            "min_price_per_night",
        )
        read_only_fields = fields


class HotelDetailSerializer(serializers.ModelSerializer):
    """Hotel with all its rooms."""

    owner_id = serializers.IntegerField(read_only=True)
    rooms = RoomSerializer(many=True, read_only=True)

    class Meta:
        model = Hotel
        fields = (
            "id",
            "owner_id",
            "name",
            "description",
            "city",
            "country",
            "amenities",
            "rating",
            "total_reviews",
            "rooms",
        )
        read_only_fields = fields
