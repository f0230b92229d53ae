import logging

from django.contrib.auth import authenticate, get_user_model
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from hotel_booking_service.exceptions import (
    EmailAlreadyExists,
    InvalidCredentials,
    envelope,
)
from user.serializers import LoginSerializer, SignupSerializer, UserSerializer

logger = logging.getLogger(__name__)


def issue_access_token(user):
    """Return a JWT access token carrying the user's role."""
    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role
    return str(refresh.access_token)


@extend_schema(tags=["Auth"])
class SignupView(APIView):
    """Create a customer or owner account."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    @extend_schema(
        request=SignupSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(description="Invalid request or email already registered"),
        },
        summary="Sign up",
    )
    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = get_user_model().objects.normalize_email(serializer.validated_data["email"])
        if get_user_model().objects.filter(email__iexact=email).exists():
            raise EmailAlreadyExists()

        user = serializer.save()
        logger.info(f"User {user.id} signed up as {user.role}")
        return Response(
            envelope(UserSerializer(user).data), status=status.HTTP_201_CREATED
        )


@extend_schema(tags=["Auth"])
class LoginView(APIView):
    """Exchange email and password for an access token."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    @extend_schema(
        request=LoginSerializer,
        responses={
            200: OpenApiResponse(description="Token and user"),
            401: OpenApiResponse(description="Invalid credentials"),
        },
        summary="Log in",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            raise InvalidCredentials()

        return Response(
            envelope(
                {
                    "token": issue_access_token(user),
                    "user": UserSerializer(user).data,
                }
            ),
            status=status.HTTP_200_OK,
        )
