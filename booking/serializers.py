from rest_framework import serializers

from booking.models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """
    Input of a booking request.
    Date ordering and capacity are business rules checked by the service.
    """

    room_id = serializers.IntegerField(min_value=1)
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    guests = serializers.IntegerField(min_value=1)


class BookingSerializer(serializers.ModelSerializer):
    """Booking as returned after creation."""

    user_id = serializers.IntegerField(read_only=True)
    room_id = serializers.IntegerField(read_only=True)
    hotel_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Booking
        fields = (
            "id",
            "user_id",
            "room_id",
            "hotel_id",
            "check_in_date",
            "check_out_date",
            "guests",
            "total_price",
            "status",
            "created_at",
        )
        read_only_fields = fields


class BookingListSerializer(serializers.ModelSerializer):
    """Booking with hotel and room details for the booking list."""

    room_id = serializers.IntegerField(read_only=True)
    hotel_id = serializers.IntegerField(read_only=True)
    hotel_name = serializers.CharField(source="hotel.name", read_only=True)
    room_number = serializers.CharField(source="room.number", read_only=True)
    room_type = serializers.CharField(source="room.type", read_only=True)

    class Meta:
        model = Booking
        fields = (
            "id",
            "room_id",
            "hotel_id",
            "hotel_name",
            "room_number",
            "room_type",
            "check_in_date",
            "check_out_date",
            "guests",
            "total_price",
            "status",
            "created_at",
            "cancelled_at",
        )
        read_only_fields = fields


class BookingCancelSerializer(serializers.ModelSerializer):
    """Result of a cancellation."""

    class Meta:
        model = Booking
        fields = ("id", "status", "cancelled_at")
        read_only_fields = fields
