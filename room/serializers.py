from decimal import Decimal

from rest_framework import serializers

from room.models import Room


class RoomSerializer(serializers.ModelSerializer):
    """Serializer for Room model."""

    hotel_id = serializers.IntegerField(read_only=True)
    price_per_night = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01")
    )
    max_occupancy = serializers.IntegerField(min_value=1)

    class Meta:
        model = Room
        fields = ("id", "hotel_id", "number", "type", "price_per_night", "max_occupancy")
        read_only_fields = ("id", "hotel_id")


class RoomCalendarSerializer(serializers.Serializer):
    """Serializer for room availability calendar response."""

    date = serializers.DateField()
    available = serializers.BooleanField()
