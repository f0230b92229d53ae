from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.authentication import JWTAuthentication

from hotel_booking_service.exceptions import envelope
from review.serializers import ReviewCreateSerializer, ReviewSerializer
from review.services import ReviewService


@extend_schema(tags=["Reviews"])
class ReviewCreateView(APIView):
    """Submit a review for a finished stay."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = [IsAuthenticated]
    service_class = ReviewService

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: OpenApiResponse(
                description="Invalid request, booking not eligible or already reviewed"
            ),
            403: OpenApiResponse(description="Booking belongs to another user"),
            404: OpenApiResponse(description="Booking not found"),
        },
        summary="Submit review",
        description=(
            "Review a stay after its check-out moment has passed. "
            "The hotel's average rating is updated in the same transaction."
        ),
    )
    def post(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = self.service_class().submit_review(
            request.user,
            booking_id=serializer.validated_data["booking_id"],
            rating=serializer.validated_data["rating"],
            comment=serializer.validated_data.get("comment"),
        )
        return Response(
            envelope(ReviewSerializer(review).data), status=status.HTTP_201_CREATED
        )
