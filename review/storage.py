from hotel.models import Hotel
from review.models import Review


class ReviewStorage:
    """Data access used by review submission and rating aggregation."""

    def find_hotel_by_id(self, hotel_id, for_update=False):
        queryset = Hotel.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        return queryset.filter(pk=hotel_id).first()

    def update_hotel_rating(self, hotel_id, rating, total_reviews) -> int:
        return Hotel.objects.filter(pk=hotel_id).update(
            rating=rating, total_reviews=total_reviews
        )

    def find_review_by_user_and_booking(self, user_id, booking_id):
        return Review.objects.filter(user_id=user_id, booking_id=booking_id).first()

    def create_review(self, **fields):
        return Review.objects.create(**fields)
