from datetime import date, datetime
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.utils import timezone

from booking.models import Booking
from hotel.models import Hotel
from room.models import Room


def create_customer(email="guest@test.com", **extra):
    return get_user_model().objects.create_user(
        email=email, password="password123", name="Test Guest", **extra
    )


def create_owner(email="owner@test.com"):
    return get_user_model().objects.create_user(
        email=email, password="password123", name="Test Owner", role="owner"
    )


def create_hotel(owner, **extra):
    fields = {"name": "Grand Hotel", "city": "Kyiv", "country": "Ukraine"}
    fields.update(extra)
    return Hotel.objects.create(owner=owner, **fields)


def create_room(hotel, number="101", price="100.00", max_occupancy=2, room_type="DOUBLE"):
    return Room.objects.create(
        hotel=hotel,
        number=number,
        type=room_type,
        price_per_night=Decimal(price),
        max_occupancy=max_occupancy,
    )


def create_booking(user, room, check_in_date, check_out_date, status=None, guests=1):
    nights = (check_out_date - check_in_date).days
    return Booking.objects.create(
        user=user,
        room=room,
        hotel=room.hotel,
        check_in_date=check_in_date,
        check_out_date=check_out_date,
        guests=guests,
        total_price=room.price_per_night * nights,
        status=status or Booking.BookingStatus.CONFIRMED,
    )


def fixed_clock(moment):
    return lambda: moment


def aware(year, month, day, hour=0, minute=0, second=0):
    return timezone.make_aware(datetime(year, month, day, hour, minute, second))


# Clock used by service tests: noon on 20 May 2025.
NOW = aware(2025, 5, 20, 12)
TODAY = date(2025, 5, 20)
