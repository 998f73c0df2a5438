"""
Блокировки на уровне чатов.

Обновления одного чата обрабатываются в порядке поступления,
обновления разных чатов - параллельно.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from ...domain.entities import ChatRef

logger = logging.getLogger("registry-bot.infrastructure.session_lock")


class SessionLockManager:
    """
    Менеджер блокировок на уровне чатов.

    Использует отдельную asyncio.Lock для каждого чата. asyncio.Lock
    выдается ожидающим в порядке FIFO, поэтому задачи одного чата
    выполняются в порядке их создания. Блокировка удаляется, когда
    ее больше никто не держит и не ждет.

    Атрибуты:
        _locks: Словарь блокировок по идентификатору чата
        _users: Количество задач, держащих или ожидающих блокировку

    Пример:
        >>> lock_manager = SessionLockManager()
        >>> async with lock_manager.lock(42):
        ...     await dispatcher.dispatch(42, "/help", reply)
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def lock(self, session_id: ChatRef) -> AsyncIterator[None]:
        """
        Захватить блокировку чата.

        Args:
            session_id: Идентификатор чата
        """
        key = str(session_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
            logger.debug(f"Created new lock for session {key}")
        self._users[key] = self._users.get(key, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def get_lock_count(self) -> int:
        """Количество блокировок, которые сейчас хранятся."""
        return len(self._locks)

    def is_locked(self, session_id: ChatRef) -> bool:
        lock = self._locks.get(str(session_id))
        return lock.locked() if lock else False
