from datetime import timedelta

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ReadOnlyModelViewSet
from rest_framework_simplejwt.authentication import JWTAuthentication

from booking.models import Booking
from booking.services import ranges_overlap
from hotel_booking_service.exceptions import RoomNotFound, envelope
from room.models import Room
from room.serializers import RoomCalendarSerializer, RoomSerializer
from room.validators import validate_calendar_range


@extend_schema(tags=["Rooms"])
class RoomViewSet(ReadOnlyModelViewSet):
    """
    ViewSet for reading rooms.

    Supports listing and retrieving rooms and the room
    availability calendar. Rooms are created through their hotel.
    """

    queryset = Room.objects.all().order_by("id")
    serializer_class = RoomSerializer
    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)
    filterset_fields = ("hotel", "type", "max_occupancy")
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        """Return serializer class depending on the current action."""

        if self.action == "get_calendar":
            return RoomCalendarSerializer
        return RoomSerializer

    def get_object(self):
        room = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if room is None:
            raise RoomNotFound()
        return room

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.filter_queryset(self.get_queryset()), many=True)
        return Response(envelope(serializer.data))

    def retrieve(self, request, *args, **kwargs):
        return Response(envelope(self.get_serializer(self.get_object()).data))

    @extend_schema(
        request=None,
        parameters=[
            OpenApiParameter(
                name="date_from",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="First date (YYYY-MM-DD)",
                required=True,
            ),
            OpenApiParameter(
                name="date_to",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Last date, inclusive (YYYY-MM-DD)",
                required=True,
            ),
        ],
        responses={200: RoomCalendarSerializer(many=True)},
        description=(
            "Get room availability calendar for a given date range.\n\n"
            "Only confirmed bookings occupy dates; a booking occupies every "
            "night from check-in up to, but not including, check-out."
        ),
    )
    @action(methods=["GET"], detail=True, url_path="calendar", filter_backends=[])
    def get_calendar(self, request, pk=None):
        """
        Return room availability calendar for a given date range.

        Dates between date_from and date_to (inclusive) are returned
        with availability status.
        """

        room = self.get_object()

        date_from, date_to = validate_calendar_range(request.query_params)

        bookings = list(
            Booking.objects.filter(
                room=room,
                status=Booking.BookingStatus.CONFIRMED,
                check_in_date__lt=date_to + timedelta(days=1),
                check_out_date__gt=date_from,
            )
        )

        one_day = timedelta(days=1)
        calendar = []
        day = date_from
        while day <= date_to:
            occupied = any(
                ranges_overlap(booking.check_in_date, booking.check_out_date, day, day + one_day)
                for booking in bookings
            )
            calendar.append({"date": day, "available": not occupied})
            day += one_day

        serializer = RoomCalendarSerializer(calendar, many=True)
        return Response(envelope(serializer.data))
