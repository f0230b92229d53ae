from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.routers import DefaultRouter

from booking.views import BookingViewSet
from hotel.views import HotelViewSet
from room.views import RoomViewSet

router = DefaultRouter()
router.register("hotels", HotelViewSet, basename="hotel")
router.register("rooms", RoomViewSet, basename="room")
router.register("bookings", BookingViewSet, basename="booking")

urlpatterns = [
    path("api/auth/", include("user.urls", namespace="user")),
    path("api/reviews/", include("review.urls", namespace="review")),
    path("api/", include(router.urls)),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/doc/swagger/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
