"""
Шлюзы Telegram: long-poll (getUpdates) и webhook.

Отправка сообщений у обоих общая, различается только способ
получения обновлений.
"""

import asyncio
import logging
from typing import AsyncIterator, BinaryIO, Optional

from ...domain.entities import ChatRef, Update
from ...domain.ports import IMessagingGateway
from .api import TelegramBotApi
from .update_parser import parse_update

logger = logging.getLogger("registry-bot.infrastructure.telegram.gateway")


class TelegramGateway(IMessagingGateway):
    """Общая часть шлюзов: отправка сообщений и закрытие клиента."""

    def __init__(self, api: TelegramBotApi):
        self._api = api
        self._started = False

    async def start(self) -> None:
        """Подготовить бота к выбранному способу доставки обновлений."""
        return None

    async def _ensure_started(self) -> None:
        # Ошибка start() уходит в цикл обновлений как GatewayError
        if not self._started:
            await self.start()
            self._started = True

    async def send_text(self, chat_ref: ChatRef, text: str, parse_mode: str = "HTML") -> None:
        await self._api.call(
            "sendMessage",
            {
                "chat_id": chat_ref,
                "text": text,
                "parse_mode": parse_mode,
                "reply_markup": {"remove_keyboard": True},
            },
        )

    async def send_document(self, chat_ref: ChatRef, filename: str, content: BinaryIO) -> None:
        await self._api.call(
            "sendDocument",
            {"chat_id": str(chat_ref)},
            files={"document": (filename, content, "application/pdf")},
        )

    async def close(self) -> None:
        await self._api.close()
        logger.info("Telegram gateway closed")


class PollingTelegramGateway(TelegramGateway):
    """
    Получение обновлений через long-poll getUpdates.

    Смещение (offset) сдвигается до выдачи обновления, поэтому
    подтвержденные обновления не приходят повторно после переподключения.
    """

    def __init__(self, api: TelegramBotApi, poll_timeout: int = 30):
        super().__init__(api)
        self._poll_timeout = poll_timeout
        self._offset: Optional[int] = None

    async def start(self) -> None:
        # getUpdates не работает, пока у бота установлен webhook
        await self._api.call("deleteWebhook")
        logger.info("Webhook removed, using long polling")

    async def receive_updates(self) -> AsyncIterator[Update]:
        await self._ensure_started()
        while True:
            payload = {"timeout": self._poll_timeout}
            if self._offset is not None:
                payload["offset"] = self._offset

            raw_updates = await self._api.call(
                "getUpdates",
                payload,
                timeout=self._poll_timeout + 10,
            )
            for raw in raw_updates or []:
                self._offset = raw["update_id"] + 1
                yield parse_update(raw)


class WebhookTelegramGateway(TelegramGateway):
    """
    Получение обновлений через webhook.

    HTTP-роутер передает тело запроса в push(), а receive_updates()
    выдает обновления из внутренней очереди.
    """

    def __init__(self, api: TelegramBotApi, webhook_url: Optional[str] = None):
        super().__init__(api)
        self._webhook_url = webhook_url
        self._queue: "asyncio.Queue[Update]" = asyncio.Queue()

    async def start(self) -> None:
        if not self._webhook_url:
            logger.warning("Webhook URL is not configured, expecting it to be set externally")
            return
        await self._api.call("setWebhook", {"url": self._webhook_url})
        logger.info("Webhook registered")

    def push(self, raw: dict) -> Update:
        update = parse_update(raw)
        self._queue.put_nowait(update)
        return update

    @property
    def pending(self) -> int:
        """Количество принятых, но еще не выданных обновлений."""
        return self._queue.qsize()

    async def receive_updates(self) -> AsyncIterator[Update]:
        await self._ensure_started()
        while True:
            yield await self._queue.get()
