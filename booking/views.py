from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    OpenApiTypes,
    extend_schema,
)
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from booking.filters import BookingFilter
from booking.models import Booking
from booking.serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingListSerializer,
    BookingSerializer,
)
from booking.services import BookingService
from hotel_booking_service.exceptions import envelope


@extend_schema(tags=["Bookings"])
class BookingViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for customer bookings.
    Supports creating bookings, listing the caller's bookings and
    cancelling a booking.
    """
    serializer_class = BookingListSerializer
    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]
    filterset_class = BookingFilter
    lookup_value_regex = r"\d+"
    service_class = BookingService

    def get_service(self):
        return self.service_class()

    def get_queryset(self):
        """Bookings of the calling customer."""
        if getattr(self, "swagger_fake_view", False):
            return Booking.objects.none()
        return self.get_service().list_bookings(self.request.user)

    def get_serializer_class(self):
        """Return appropriate serializer class based on action."""
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "cancel":
            return BookingCancelSerializer
        return BookingListSerializer

    @extend_schema(
        request=BookingCreateSerializer,
        responses={
            201: BookingSerializer,
            400: OpenApiResponse(
                description="Invalid request, dates or capacity, or room not available"
            ),
            401: OpenApiResponse(
                description="Authentication credentials were not provided or are invalid"
            ),
            403: OpenApiResponse(description="Only customers can book rooms"),
            404: OpenApiResponse(description="Room not found"),
        },
        summary="Create booking",
        description="Book a room for the half-open range [check_in_date, check_out_date).",
    )
    def create(self, request, *args, **kwargs):
        """Create a confirmed booking for the calling customer."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = self.get_service().create_booking(
            request.user,
            room_id=serializer.validated_data["room_id"],
            check_in_date=serializer.validated_data["check_in_date"],
            check_out_date=serializer.validated_data["check_out_date"],
            guests=serializer.validated_data["guests"],
        )
        return Response(
            envelope(BookingSerializer(booking).data), status=status.HTTP_201_CREATED
        )

    @extend_schema(
        summary="List bookings",
        description="Retrieve the bookings of the calling customer.",
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Booking status (confirmed, cancelled)",
                required=False,
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        """List bookings with optional filtering."""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response(envelope(serializer.data))

    @extend_schema(
        request=None,
        summary="Cancel",
        description=(
            "Cancel a confirmed booking. Allowed until 24 hours before the "
            "check-in day starts and never after the stay has ended."
        ),
        responses={
            200: BookingCancelSerializer,
            400: OpenApiResponse(description="Booking cannot be cancelled"),
            401: OpenApiResponse(
                description="Authentication credentials were not provided or are invalid"
            ),
            403: OpenApiResponse(description="Booking belongs to another user"),
            404: OpenApiResponse(description="Booking not found"),
        },
    )
    @action(detail=True, methods=["put", "post"], url_path="cancel")
    def cancel(self, request, pk=None):
        """Cancel a booking of the calling customer."""
        booking = self.get_service().cancel_booking(request.user, pk)
        return Response(
            envelope(BookingCancelSerializer(booking).data),
            status=status.HTTP_200_OK,
        )
