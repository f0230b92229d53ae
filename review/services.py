import logging
import math
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from django.utils import timezone

from booking.storage import BookingStorage
from hotel_booking_service.exceptions import (
    AlreadyReviewed,
    BookingNotFound,
    HotelDataInvalid,
    InvalidRequest,
)
from review.storage import ReviewStorage
from review.validators import validate_booking_can_be_reviewed
from user.policies import can_book, can_manage_booking, enforce

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class RatingAggregate:
    rating: float
    total_reviews: int


def fold_rating(rating, total_reviews, new_rating):
    """
    Fold one more rating into a running mean.

    `total_reviews == 0` with `rating` None or 0 is the state of a hotel
    that has never been reviewed.
    """
    if total_reviews is None or total_reviews < 0:
        raise HotelDataInvalid()
    if total_reviews == 0:
        if rating not in (None, 0):
            raise HotelDataInvalid()
        return RatingAggregate(rating=float(new_rating), total_reviews=1)

    if rating is None or math.isnan(rating) or not 0 <= rating <= MAX_RATING:
        raise HotelDataInvalid()

    new_total = total_reviews + 1
    return RatingAggregate(
        rating=(rating * total_reviews + new_rating) / new_total,
        total_reviews=new_total,
    )


class RatingAggregator:
    """Keeps a hotel's `rating` and `total_reviews` in step with its reviews."""

    def __init__(self, storage=None):
        self.storage = storage or ReviewStorage()

    def apply_review(self, hotel_id, new_rating):
        """
        Add `new_rating` to the hotel's aggregate.
        The hotel row is locked for the read-modify-write.
        """
        with transaction.atomic():
            hotel = self.storage.find_hotel_by_id(hotel_id, for_update=True)
            if hotel is None:
                raise HotelDataInvalid(detail="Reviewed hotel does not exist.")

            aggregate = fold_rating(hotel.rating, hotel.total_reviews, new_rating)
            self.storage.update_hotel_rating(
                hotel_id, aggregate.rating, aggregate.total_reviews
            )

        logger.info(
            f"Hotel {hotel_id} rating is now {aggregate.rating:.2f} "
            f"over {aggregate.total_reviews} reviews"
        )
        return aggregate


class ReviewService:
    """Accepts reviews of finished stays and updates the hotel rating."""

    def __init__(self, storage=None, booking_storage=None, clock=timezone.now):
        self.storage = storage or ReviewStorage()
        self.booking_storage = booking_storage or BookingStorage()
        self.aggregator = RatingAggregator(self.storage)
        self.clock = clock

    def submit_review(self, user, booking_id, rating, comment=None):
        enforce(can_book(user.role))
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidRequest(detail=f"Rating must be between {MIN_RATING} and {MAX_RATING}.")

        booking = self.booking_storage.find_booking_by_id(booking_id)
        if booking is None:
            raise BookingNotFound()

        enforce(can_manage_booking(user.role, booking.user_id, user.id))
        validate_booking_can_be_reviewed(booking, self.clock())

        if self.storage.find_review_by_user_and_booking(user.id, booking.id):
            raise AlreadyReviewed()

        try:
            with transaction.atomic():
                review = self.storage.create_review(
                    user_id=user.id,
                    booking_id=booking.id,
                    hotel_id=booking.hotel_id,
                    rating=rating,
                    comment=comment,
                )
                self.aggregator.apply_review(booking.hotel_id, rating)
        except IntegrityError as e:
            if self.storage.find_review_by_user_and_booking(user.id, booking.id):
                logger.warning(f"Booking {booking.id} was reviewed concurrently: {e}")
                raise AlreadyReviewed()
            logger.error(f"Review of booking {booking.id} rejected by storage: {e}")
            raise

        logger.info(f"Review {review.id} submitted for booking {booking.id}")
        return review
