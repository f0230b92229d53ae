from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from booking.tests.helpers import create_customer, create_hotel, create_owner, create_room
from hotel.models import Hotel
from room.models import Room

HOTELS_URL = reverse("hotel-list")


def detail_url(hotel_id):
    return reverse("hotel-detail", args=[hotel_id])


def rooms_url(hotel_id):
    return reverse("hotel-add-room", args=[hotel_id])


ROOM_PAYLOAD = {
    "number": "101",
    "type": "DOUBLE",
    "price_per_night": "150.00",
    "max_occupancy": 2,
}


class HotelCreateAPITestCase(APITestCase):

    def setUp(self):
        self.owner = create_owner()
        self.client.force_authenticate(user=self.owner)

    def test_owner_creates_hotel(self):
        response = self.client.post(
            HOTELS_URL,
            {
                "name": "Sea View",
                "city": "Odesa",
                "country": "Ukraine",
                "amenities": ["wifi", "pool"],
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data["data"]
        self.assertEqual(data["owner_id"], self.owner.id)
        self.assertEqual(data["amenities"], ["wifi", "pool"])
        self.assertIsNone(data["rating"])
        self.assertEqual(data["total_reviews"], 0)

    def test_customer_cannot_create_hotel(self):
        self.client.force_authenticate(user=create_customer())

        response = self.client.post(
            HOTELS_URL,
            {"name": "Sea View", "city": "Odesa", "country": "Ukraine"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "FORBIDDEN")
        self.assertFalse(Hotel.objects.exists())

    def test_invalid_hotel_payload(self):
        response = self.client.post(HOTELS_URL, {"name": "X"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "INVALID_REQUEST")


class AddRoomAPITestCase(APITestCase):

    def setUp(self):
        self.owner = create_owner()
        self.hotel = create_hotel(self.owner)
        self.client.force_authenticate(user=self.owner)

    def test_hotel_owner_adds_room(self):
        response = self.client.post(rooms_url(self.hotel.id), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["hotel_id"], self.hotel.id)
        self.assertEqual(response.data["data"]["price_per_night"], "150.00")
        self.assertTrue(Room.objects.filter(hotel=self.hotel, number="101").exists())

    def test_other_owner_cannot_add_room(self):
        """Adding rooms is allowed for the hotel's owner and nobody else."""
        self.client.force_authenticate(user=create_owner(email="rival@test.com"))

        response = self.client.post(rooms_url(self.hotel.id), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Room.objects.exists())

    def test_customer_cannot_add_room(self):
        self.client.force_authenticate(user=create_customer())

        response = self.client.post(rooms_url(self.hotel.id), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_duplicate_room_number(self):
        create_room(self.hotel, number="101")

        response = self.client.post(rooms_url(self.hotel.id), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "ROOM_ALREADY_EXISTS")

    def test_same_room_number_in_other_hotel(self):
        create_room(create_hotel(create_owner(email="rival@test.com")), number="101")

        response = self.client.post(rooms_url(self.hotel.id), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_room_for_unknown_hotel(self):
        response = self.client.post(rooms_url(999999), ROOM_PAYLOAD, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "HOTEL_NOT_FOUND")

    def test_room_with_non_positive_price(self):
        payload = dict(ROOM_PAYLOAD, price_per_night="0")

        response = self.client.post(rooms_url(self.hotel.id), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "INVALID_REQUEST")


class HotelSearchAPITestCase(APITestCase):

    def setUp(self):
        owner = create_owner()
        self.kyiv = create_hotel(owner, name="Kyiv Inn", city="Kyiv", rating=4.5, total_reviews=2)
        self.lviv = create_hotel(owner, name="Lviv House", city="Lviv", rating=3.0, total_reviews=1)
        self.empty = create_hotel(owner, name="New Place", city="Kyiv")
        create_room(self.kyiv, number="1", price="80.00")
        create_room(self.kyiv, number="2", price="200.00")
        create_room(self.lviv, number="1", price="120.00")

        self.client.force_authenticate(user=create_customer())

    def ids(self, response):
        return [hotel["id"] for hotel in response.data["data"]]

    def test_list_all_with_cheapest_price(self):
        response = self.client.get(HOTELS_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        prices = {h["id"]: h["min_price_per_night"] for h in response.data["data"]}
        self.assertEqual(prices, {self.kyiv.id: "80.00", self.lviv.id: "120.00", self.empty.id: None})

    def test_filter_by_city(self):
        response = self.client.get(HOTELS_URL, {"city": "kyiv"})

        self.assertEqual(self.ids(response), [self.kyiv.id, self.empty.id])

    def test_filter_by_min_rating(self):
        response = self.client.get(HOTELS_URL, {"min_rating": 4})

        self.assertEqual(self.ids(response), [self.kyiv.id])

    def test_filter_by_price_range(self):
        response = self.client.get(HOTELS_URL, {"min_price": 100, "max_price": 150})

        self.assertEqual(self.ids(response), [self.lviv.id])

    def test_price_range_must_match_single_room(self):
        response = self.client.get(HOTELS_URL, {"min_price": 90, "max_price": 110})

        self.assertEqual(self.ids(response), [])

    def test_hotel_detail_with_rooms(self):
        response = self.client.get(detail_url(self.kyiv.id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([room["number"] for room in response.data["data"]["rooms"]], ["1", "2"])

    def test_hotel_detail_not_found(self):
        response = self.client.get(detail_url(999999))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "HOTEL_NOT_FOUND")
