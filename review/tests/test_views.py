from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from booking.tests.helpers import (
    create_booking,
    create_customer,
    create_hotel,
    create_owner,
    create_room,
)

REVIEWS_URL = reverse("review:review-create")


class ReviewAPITestCase(APITestCase):

    def setUp(self):
        self.user = create_customer()
        self.hotel = create_hotel(create_owner())
        self.room = create_room(self.hotel)
        today = timezone.localdate()
        self.past_booking = create_booking(
            self.user, self.room, today - timedelta(days=6), today - timedelta(days=2)
        )
        self.future_booking = create_booking(
            self.user, self.room, today + timedelta(days=3), today + timedelta(days=5)
        )

        self.client.force_authenticate(user=self.user)

    def test_submit_review(self):
        response = self.client.post(
            REVIEWS_URL,
            {"booking_id": self.past_booking.id, "rating": 5, "comment": "Lovely"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["data"]["hotel_id"], self.hotel.id)
        self.assertEqual(response.data["data"]["rating"], 5)
        self.assertEqual(response.data["data"]["comment"], "Lovely")

        self.hotel.refresh_from_db()
        self.assertEqual(self.hotel.rating, 5.0)
        self.assertEqual(self.hotel.total_reviews, 1)

    def test_submit_review_without_comment(self):
        response = self.client.post(
            REVIEWS_URL, {"booking_id": self.past_booking.id, "rating": 3}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(response.data["data"]["comment"])

    def test_review_before_checkout(self):
        response = self.client.post(
            REVIEWS_URL, {"booking_id": self.future_booking.id, "rating": 4}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "BOOKING_NOT_ELIGIBLE")

    def test_review_twice(self):
        payload = {"booking_id": self.past_booking.id, "rating": 4}
        self.client.post(REVIEWS_URL, payload, format="json")

        response = self.client.post(REVIEWS_URL, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "ALREADY_REVIEWED")

    def test_rating_out_of_range(self):
        response = self.client.post(
            REVIEWS_URL, {"booking_id": self.past_booking.id, "rating": 6}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "INVALID_REQUEST")

    def test_review_unknown_booking(self):
        response = self.client.post(
            REVIEWS_URL, {"booking_id": 999999, "rating": 4}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "BOOKING_NOT_FOUND")

    def test_review_by_another_customer(self):
        self.client.force_authenticate(user=create_customer(email="other@test.com"))

        response = self.client.post(
            REVIEWS_URL, {"booking_id": self.past_booking.id, "rating": 4}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
