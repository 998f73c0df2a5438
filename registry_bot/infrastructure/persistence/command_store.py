"""
Последовательный (single-writer) доступ к хранилищу команд.

Все чтения и записи проходят через одну очередь и выполняются
одной фоновой задачей строго по одной.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Tuple

from ...domain.entities import ChatRef
from ...domain.repositories import CommandRepository

logger = logging.getLogger("registry-bot.infrastructure.command_store")

_Operation = Callable[[], Awaitable[Any]]
_QueueItem = Optional[Tuple[_Operation, "asyncio.Future[Any]"]]


class SerializedCommandStore(CommandRepository):
    """
    Актор над CommandRepository.

    Вызывающие ставят операцию в очередь и ждут future; единственная
    задача-исполнитель выполняет операции в порядке поступления.
    Исключения репозитория передаются вызывающему через future.

    Атрибуты:
        _repository: Репозиторий, к которому сериализуется доступ
        _queue: Очередь операций; None - сигнал остановки
        _worker: Задача-исполнитель (запускается при первом обращении)

    Пример:
        >>> store = SerializedCommandStore(CommandRepositoryImpl(session_maker))
        >>> await store.save_last(42, "/inn 7707083893")
        >>> await store.get_last(42)
        '/inn 7707083893'
        >>> await store.close()
    """

    def __init__(self, repository: CommandRepository):
        self._repository = repository
        self._queue: "asyncio.Queue[_QueueItem]" = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None
        self._closed = False

    async def get_last(self, session_id: ChatRef) -> Optional[str]:
        return await self._submit(lambda: self._repository.get_last(session_id))

    async def save_last(self, session_id: ChatRef, text: str) -> None:
        await self._submit(lambda: self._repository.save_last(session_id, text))

    @property
    def pending(self) -> int:
        """Количество операций, ожидающих выполнения."""
        return self._queue.qsize()

    async def close(self) -> None:
        """
        Остановить исполнителя.

        Операции, поставленные до close(), выполняются до конца.
        """
        self._closed = True
        if self._worker is None:
            return
        await self._queue.put(None)
        await self._worker
        self._worker = None
        logger.info("Command store worker stopped")

    async def _submit(self, operation: _Operation) -> Any:
        if self._closed:
            raise RuntimeError("SerializedCommandStore is closed")
        self._ensure_worker()

        future: "asyncio.Future[Any]" = asyncio.get_running_loop().create_future()
        await self._queue.put((operation, future))
        return await future

    def _ensure_worker(self) -> None:
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run(), name="command-store-worker")
            logger.debug("Command store worker started")

    async def _run(self) -> None:
        while True:
            item = await self._queue.get()
            try:
                if item is None:
                    return
                operation, future = item
                try:
                    result = await operation()
                except Exception as e:
                    if not future.cancelled():
                        future.set_exception(e)
                else:
                    if not future.cancelled():
                        future.set_result(result)
            finally:
                self._queue.task_done()
