from datetime import date, timedelta
from unittest import mock

from django.test import TestCase, override_settings

from booking.services import BookingService
from booking.tests.helpers import (
    NOW,
    create_booking,
    create_customer,
    create_hotel,
    create_owner,
    create_room,
    fixed_clock,
)
from booking.validators import start_of_day
from hotel_booking_service.exceptions import RoomNotAvailable
from notifications.services.telegram import TelegramNotifier
from notifications.tasks import send_telegram_notification
from review.services import ReviewService

DELAY = "booking.signals.send_telegram_notification.delay"


@override_settings(TELEGRAM_NOTIFICATIONS_ENABLED=True)
class BookingNotificationTestCase(TestCase):

    def setUp(self):
        self.customer = create_customer()
        self.hotel = create_hotel(create_owner(), name="Sea View")
        self.room = create_room(self.hotel, number="204")

    def test_booking_creation_is_notified_after_commit(self):
        service = BookingService(clock=fixed_clock(NOW))

        with mock.patch(DELAY) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                booking = service.create_booking(
                    self.customer,
                    room_id=self.room.id,
                    check_in_date=date(2025, 6, 1),
                    check_out_date=date(2025, 6, 3),
                    guests=1,
                )

        delay.assert_called_once()
        message = delay.call_args.args[0]
        self.assertIn("New booking created", message)
        self.assertIn(f"Booking ID: {booking.id}", message)
        self.assertIn("Room: 204", message)
        self.assertIn("Total price: 200.00", message)

    def test_booking_cancellation_is_notified(self):
        booking = create_booking(self.customer, self.room, date(2025, 6, 10), date(2025, 6, 12))
        service = BookingService(clock=fixed_clock(NOW))

        with mock.patch(DELAY) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                service.cancel_booking(self.customer, booking.id)

        delay.assert_called_once()
        self.assertIn("Booking Canceled", delay.call_args.args[0])

    def test_rejected_booking_is_not_notified(self):
        create_booking(self.customer, self.room, date(2025, 6, 1), date(2025, 6, 5))
        service = BookingService(clock=fixed_clock(NOW))

        with mock.patch(DELAY) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                with self.assertRaises(RoomNotAvailable):
                    service.create_booking(
                        self.customer,
                        room_id=self.room.id,
                        check_in_date=date(2025, 6, 2),
                        check_out_date=date(2025, 6, 3),
                        guests=1,
                    )

        delay.assert_not_called()

    def test_review_is_notified(self):
        booking = create_booking(self.customer, self.room, date(2025, 6, 1), date(2025, 6, 3))
        service = ReviewService(
            clock=fixed_clock(start_of_day(booking.check_out_date) + timedelta(days=1))
        )

        with mock.patch(DELAY) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                service.submit_review(self.customer, booking.id, rating=5, comment="Quiet room")

        delay.assert_called_once()
        message = delay.call_args.args[0]
        self.assertIn("Hotel: Sea View", message)
        self.assertIn("Rating: 5/5", message)
        self.assertIn("Comment: Quiet room", message)


class DisabledNotificationTestCase(TestCase):

    @override_settings(TELEGRAM_NOTIFICATIONS_ENABLED=False)
    def test_nothing_is_sent_without_bot_token(self):
        customer = create_customer()
        room = create_room(create_hotel(create_owner()))

        with mock.patch(DELAY) as delay:
            with self.captureOnCommitCallbacks(execute=True):
                create_booking(customer, room, date(2025, 6, 1), date(2025, 6, 3))

        delay.assert_not_called()


class SendTelegramNotificationTestCase(TestCase):

    @override_settings(CHAT_ID="12345", TELEGRAM_BOT_TOKEN="123:abc")
    def test_task_sends_message_to_configured_chat(self):
        with mock.patch(
            "notifications.tasks.TelegramNotifier.send"
        ) as send:
            send_telegram_notification("hello")

        send.assert_called_once_with(chat_id=12345, text="hello")

    @override_settings(CHAT_ID="")
    def test_task_without_chat_id_does_not_send(self):
        with mock.patch(
            "notifications.tasks.TelegramNotifier.send"
        ) as send:
            result = send_telegram_notification("hello")

        send.assert_not_called()
        self.assertEqual(result, "CHAT_ID is not configured")

    @override_settings(TELEGRAM_BOT_TOKEN="")
    def test_notifier_requires_bot_token(self):
        with self.assertRaises(ValueError):
            TelegramNotifier.from_settings()
