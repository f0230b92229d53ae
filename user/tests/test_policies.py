from django.test import SimpleTestCase

from hotel_booking_service.exceptions import Forbidden
from user.policies import (
    can_book,
    can_create_hotel,
    can_manage_booking,
    can_mutate_room,
    enforce,
)


class PolicyTestCase(SimpleTestCase):

    def test_only_owner_can_create_hotel(self):
        self.assertTrue(can_create_hotel("owner"))
        self.assertFalse(can_create_hotel("customer"))

    def test_hotel_owner_can_mutate_room(self):
        self.assertTrue(can_mutate_room("owner", hotel_owner_id=7, caller_id=7))

    def test_other_owner_cannot_mutate_room(self):
        decision = can_mutate_room("owner", hotel_owner_id=7, caller_id=8)

        self.assertFalse(decision)
        self.assertEqual(decision.reason, "You do not own this hotel.")

    def test_customer_cannot_mutate_room_even_with_matching_id(self):
        self.assertFalse(can_mutate_room("customer", hotel_owner_id=7, caller_id=7))

    def test_only_customer_can_book(self):
        self.assertTrue(can_book("customer"))
        self.assertFalse(can_book("owner"))
        self.assertFalse(can_book(None))

    def test_manage_booking_requires_booking_user(self):
        self.assertTrue(can_manage_booking("customer", booking_user_id=3, caller_id=3))
        self.assertFalse(can_manage_booking("customer", booking_user_id=3, caller_id=4))
        self.assertFalse(can_manage_booking("owner", booking_user_id=3, caller_id=3))

    def test_enforce_raises_forbidden_with_reason(self):
        with self.assertRaises(Forbidden) as ctx:
            enforce(can_create_hotel("customer"))

        self.assertEqual(str(ctx.exception.detail), "Only hotel owners can create hotels.")

    def test_enforce_returns_allowed_decision(self):
        self.assertTrue(enforce(can_book("customer")).allowed)
