from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import Signal, receiver

from booking.models import Booking
from notifications.messages import (
    generate_booking_cancellation_message,
    generate_booking_creation_message,
)
from notifications.tasks import send_telegram_notification

# Sent after a booking moved to CANCELLED. The status change is a
# conditional queryset update, which does not emit post_save.
booking_cancelled = Signal()


def queue_notification(message):
    transaction.on_commit(lambda: send_telegram_notification.delay(message))


@receiver(post_save, sender=Booking)
def booking_notification(sender, instance, created, **kwargs):
    """
    Send Telegram notification when a booking is created.

    Signal Handler: Triggered after any Booking instance is saved.
    The message is queued only after the surrounding transaction commits.
    """
    if created and settings.TELEGRAM_NOTIFICATIONS_ENABLED:
        queue_notification(generate_booking_creation_message(instance))


@receiver(booking_cancelled)
def booking_cancellation_notification(sender, instance, **kwargs):
    """Send Telegram notification when a booking is cancelled."""
    if settings.TELEGRAM_NOTIFICATIONS_ENABLED:
        queue_notification(generate_booking_cancellation_message(instance))
