from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from booking.signals import queue_notification
from notifications.messages import generate_review_message
from review.models import Review


@receiver(post_save, sender=Review)
def review_notification(sender, instance, created, **kwargs):
    """Send Telegram notification when a guest reviews a stay."""
    if created and settings.TELEGRAM_NOTIFICATIONS_ENABLED:
        queue_notification(generate_review_message(instance))
