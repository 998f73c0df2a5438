"""
Цикл обработки входящих обновлений мессенджера.

Получает обновления из шлюза, запускает по задаче на каждое обновление
и пересылает ответы диспетчера обратно в шлюз.
"""

import asyncio
import logging
from contextlib import suppress
from functools import partial
from typing import AsyncIterator, Optional, Set

from ..core.errors import GatewayError
from ..domain.entities import (
    ChatRef,
    NonTextMessage,
    OutboundDocument,
    OutboundMessage,
    TextMessage,
    Update,
)
from ..domain.ports import IMessagingGateway
from ..infrastructure.concurrency import SessionLockManager
from .commands import messages
from .commands.dispatcher import CommandDispatcher

logger = logging.getLogger("registry-bot.application.update_loop")

# Пауза перед повторной подпиской после ошибки транспорта
RECONNECT_BACKOFF_SECONDS = 2.0


class SessionUpdateLoop:
    """
    Цикл получения обновлений.

    - TextMessage передается диспетчеру;
    - NonTextMessage получает предупреждение "только текст";
    - OtherUpdate логируется и отбрасывается.

    Обновления одного чата обрабатываются по очереди (SessionLockManager),
    разных чатов - параллельно. Ошибка внутри задачи логируется и не
    останавливает цикл. При GatewayError во время получения цикл ждет
    RECONNECT_BACKOFF_SECONDS и подписывается заново.

    Пример:
        >>> loop = SessionUpdateLoop(gateway, dispatcher)
        >>> stop_event = asyncio.Event()
        >>> task = asyncio.create_task(loop.run(stop_event))
        >>> ...
        >>> stop_event.set()
        >>> await task
    """

    def __init__(
        self,
        gateway: IMessagingGateway,
        dispatcher: CommandDispatcher,
        lock_manager: Optional[SessionLockManager] = None,
        reconnect_backoff: float = RECONNECT_BACKOFF_SECONDS,
    ):
        self._gateway = gateway
        self._dispatcher = dispatcher
        self._locks = lock_manager or SessionLockManager()
        self._reconnect_backoff = reconnect_backoff
        self._tasks: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        """Количество обновлений, которые сейчас обрабатываются."""
        return len(self._tasks)

    async def run(self, stop_event: asyncio.Event) -> None:
        """
        Обрабатывать обновления до установки stop_event.

        После остановки новые обновления не запрашиваются, начатые задачи
        выполняются до конца, затем шлюз закрывается.

        Args:
            stop_event: Сигнал кооперативной остановки
        """
        logger.info("Update loop started")
        try:
            while not stop_event.is_set():
                try:
                    exhausted = await self._receive(stop_event)
                except GatewayError as e:
                    logger.warning(f"Receiving updates failed: {e}; retrying in {self._reconnect_backoff}s")
                    await self._sleep_unless_stopped(stop_event, self._reconnect_backoff)
                    continue
                if exhausted:
                    logger.info("Update stream ended")
                    break
        finally:
            await self._drain()
            await self._gateway.close()
            logger.info("Update loop stopped")

    def submit(self, update: Update) -> asyncio.Task:
        """Запустить обработку одного обновления отдельной задачей."""
        task = asyncio.create_task(self._handle(update), name=f"update-{update.update_id}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _receive(self, stop_event: asyncio.Event) -> bool:
        """
        Читать один итератор обновлений.

        Returns:
            True если поток обновлений закончился, False если запрошена остановка
        """
        updates = self._gateway.receive_updates()
        try:
            while True:
                update = await self._next_or_stop(updates, stop_event)
                if update is None:
                    return False
                self.submit(update)
        except StopAsyncIteration:
            return True
        finally:
            aclose = getattr(updates, "aclose", None)
            if aclose is not None:
                await aclose()

    async def _next_or_stop(
        self,
        updates: AsyncIterator[Update],
        stop_event: asyncio.Event,
    ) -> Optional[Update]:
        next_update = asyncio.ensure_future(updates.__anext__())
        stopped = asyncio.ensure_future(stop_event.wait())
        try:
            await asyncio.wait({next_update, stopped}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            await _cancel(next_update)
            raise
        finally:
            await _cancel(stopped)

        # Обновление, полученное одновременно с остановкой, не теряется
        if next_update.done():
            return next_update.result()

        await _cancel(next_update)
        return None

    async def _handle(self, update: Update) -> None:
        try:
            if isinstance(update, TextMessage):
                logger.info(f"[{update.chat_ref}] Receive message type: text (update {update.update_id})")
                async with self._locks.lock(update.chat_ref):
                    status = await self._dispatcher.dispatch(
                        update.chat_ref,
                        update.text,
                        partial(self._relay, update.chat_ref),
                    )
                logger.debug(f"[{update.chat_ref}] Update {update.update_id} dispatched: {status.value}")
            elif isinstance(update, NonTextMessage):
                logger.info(f"[{update.chat_ref}] Receive message type: {update.content_type}")
                async with self._locks.lock(update.chat_ref):
                    await self._gateway.send_text(update.chat_ref, messages.TEXT_ONLY)
            else:
                logger.info(f"Unknown update type: {update.update_type}")
        except Exception:
            logger.error(f"Failed to handle update {update.update_id}", exc_info=True)

    async def _relay(self, chat_ref: ChatRef, message: OutboundMessage) -> None:
        if isinstance(message, OutboundDocument):
            await self._gateway.send_document(chat_ref, message.filename, message.content)
        else:
            await self._gateway.send_text(chat_ref, message.text, message.parse_mode)

    async def _drain(self) -> None:
        if self._tasks:
            logger.info(f"Waiting for {len(self._tasks)} in-flight updates")
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    @staticmethod
    async def _sleep_unless_stopped(stop_event: asyncio.Event, delay: float) -> None:
        with suppress(asyncio.TimeoutError):
            await asyncio.wait_for(stop_event.wait(), timeout=delay)


async def _cancel(future: "asyncio.Future") -> None:
    if not future.done():
        future.cancel()
    with suppress(asyncio.CancelledError, StopAsyncIteration, GatewayError):
        await future
