import asyncio
import logging

from aiogram import Bot
from aiogram.exceptions import (
    AiogramError,
    TelegramAPIError,
    TelegramNetworkError,
    TelegramRetryAfter,
)
from django.conf import settings

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """
    Delivers booking and review alerts to a Telegram chat.

    A bot session is opened per message and closed afterwards, so the
    notifier can be used from Celery workers that run each task in a
    fresh event loop. Rate limits and network failures are re-raised
    for the task to retry; other API errors are logged and dropped.
    """

    def __init__(self, token: str | None = None):
        token = token or settings.TELEGRAM_BOT_TOKEN
        if not token:
            raise ValueError("TELEGRAM_BOT_TOKEN is not configured")
        self.token = token

    @classmethod
    def from_settings(cls):
        return cls(settings.TELEGRAM_BOT_TOKEN)

    async def _deliver(self, chat_id: int, text: str):
        bot = Bot(token=self.token)
        try:
            await bot.send_message(chat_id=chat_id, text=text)
            logger.info(f"Notification delivered to chat {chat_id}")
        except TelegramRetryAfter as e:
            logger.warning(f"Telegram rate limit for chat {chat_id}, retry in {e.retry_after}s")
            raise
        except TelegramNetworkError as e:
            logger.warning(f"Telegram unreachable for chat {chat_id}: {e}")
            raise
        except (TelegramAPIError, AiogramError) as e:
            logger.error(f"Telegram rejected notification for chat {chat_id}: {e}")
        finally:
            await bot.session.close()

    def send(self, chat_id: int, text: str) -> None:
        asyncio.run(self._deliver(chat_id, text))
