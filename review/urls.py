from django.urls import path

from review.views import ReviewCreateView

urlpatterns = [
    path("", ReviewCreateView.as_view(), name="review-create"),
]

app_name = "review"
