import logging

from django.db import IntegrityError, transaction
from django.db.models import Min
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.authentication import JWTAuthentication

from hotel.filters import HotelFilter
from hotel.models import Hotel
from hotel.permissions import IsOwnerRoleOrReadOnly
from hotel.serializers import (
    HotelDetailSerializer,
    HotelListSerializer,
    HotelSerializer,
)
from hotel_booking_service.exceptions import (
    HotelNotFound,
    RoomAlreadyExists,
    envelope,
)
from room.models import Room
from room.serializers import RoomSerializer
from user.policies import can_mutate_room, enforce

logger = logging.getLogger(__name__)


@extend_schema(tags=["Hotels"])
class HotelViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for hotels.

    Owners create hotels and add rooms to their own hotels,
    any authenticated user can search hotels and read hotel details.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated, IsOwnerRoleOrReadOnly)
    filterset_class = HotelFilter
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        """Return queryset depending on the current action."""
        queryset = Hotel.objects.all()
        if self.action == "list":
            return queryset.annotate(min_price_per_night=Min("rooms__price_per_night"))
        if self.action == "retrieve":
            return queryset.prefetch_related("rooms")
        return queryset

    def get_serializer_class(self):
        """Return serializer class depending on the current action."""
        if self.action == "list":
            return HotelListSerializer
        if self.action == "retrieve":
            return HotelDetailSerializer
        if self.action == "add_room":
            return RoomSerializer
        return HotelSerializer

    def get_object(self):
        hotel = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if hotel is None:
            raise HotelNotFound()
        self.check_object_permissions(self.request, hotel)
        return hotel

    @extend_schema(
        summary="Create hotel",
        responses={
            201: HotelSerializer,
            400: OpenApiResponse(description="Invalid request"),
            403: OpenApiResponse(description="Only owners can create hotels"),
        },
    )
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        hotel = serializer.save(owner=request.user)
        logger.info(f"Hotel {hotel.id} created by owner {request.user.id}")
        return Response(
            envelope(HotelSerializer(hotel).data), status=status.HTTP_201_CREATED
        )

    @extend_schema(
        summary="Search hotels",
        parameters=[
            OpenApiParameter("city", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("country", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter(
                "min_rating", OpenApiTypes.NUMBER, OpenApiParameter.QUERY,
                description="Minimum average rating",
            ),
            OpenApiParameter(
                "min_price", OpenApiTypes.NUMBER, OpenApiParameter.QUERY,
                description="Lowest nightly price of a matching room",
            ),
            OpenApiParameter(
                "max_price", OpenApiTypes.NUMBER, OpenApiParameter.QUERY,
                description="Highest nightly price of a matching room",
            ),
        ],
    )
    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response(envelope(serializer.data))

    @extend_schema(
        summary="Hotel details",
        responses={
            200: HotelDetailSerializer,
            404: OpenApiResponse(description="Hotel not found"),
        },
    )
    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return Response(envelope(serializer.data))

    @extend_schema(
        request=RoomSerializer,
        summary="Add room",
        responses={
            201: RoomSerializer,
            400: OpenApiResponse(description="Invalid request or duplicate room number"),
            403: OpenApiResponse(description="Caller does not own the hotel"),
            404: OpenApiResponse(description="Hotel not found"),
        },
    )
    @action(methods=["POST"], detail=True, url_path="rooms", filter_backends=[])
    def add_room(self, request, pk=None):
        """Add a room to a hotel owned by the caller."""
        hotel = self.get_object()
        enforce(can_mutate_room(request.user.role, hotel.owner_id, request.user.id))

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        number = serializer.validated_data["number"]
        if Room.objects.filter(hotel=hotel, number=number).exists():
            raise RoomAlreadyExists()

        try:
            with transaction.atomic():
                room = serializer.save(hotel=hotel)
        except IntegrityError:
            raise RoomAlreadyExists()

        logger.info(f"Room {room.number} added to hotel {hotel.id}")
        return Response(
            envelope(RoomSerializer(room).data), status=status.HTTP_201_CREATED
        )
