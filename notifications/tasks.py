import logging

from aiogram.exceptions import TelegramNetworkError, TelegramRetryAfter
from celery import shared_task
from django.conf import settings

from notifications.services.telegram import TelegramNotifier

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(TelegramRetryAfter, TelegramNetworkError),
    retry_backoff=True,
    retry_kwargs={"max_retries": 5},
)
def send_telegram_notification(self, message: str):
    """Push a booking or review alert to the staff chat."""
    chat_id = settings.CHAT_ID
    if not chat_id:
        logger.error("CHAT_ID is not configured, dropping notification")
        return "CHAT_ID is not configured"

    TelegramNotifier.from_settings().send(chat_id=int(chat_id), text=message)
    return f"Notification sent to chat {chat_id}"
