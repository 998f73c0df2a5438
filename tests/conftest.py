"""
Pytest configuration and fixtures.
"""
import asyncio
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

import pytest

from registry_bot.domain.entities import OutboundDocument, OutboundText
from registry_bot.domain.ports import IRegistryProvider
from registry_bot.domain.repositories import CommandRepository


class InMemoryCommandRepository(CommandRepository):
    """Хранилище последних команд в памяти."""

    def __init__(self, delay: float = 0):
        self.saved: Dict[str, str] = {}
        self.save_calls: List[Tuple[str, str]] = []
        self.active = 0
        self.max_active = 0
        self._delay = delay

    async def get_last(self, session_id) -> Optional[str]:
        await self._enter()
        try:
            return self.saved.get(str(session_id))
        finally:
            self.active -= 1

    async def save_last(self, session_id, text: str) -> None:
        await self._enter()
        try:
            self.saved[str(session_id)] = text
            self.save_calls.append((str(session_id), text))
        finally:
            self.active -= 1

    async def _enter(self) -> None:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        await asyncio.sleep(self._delay)


class ReplyCollector:
    """Собирает исходящие сообщения диспетчера."""

    def __init__(self):
        self.messages = []

    async def __call__(self, message) -> None:
        self.messages.append(message)

    @property
    def texts(self) -> List[str]:
        return [m.text for m in self.messages if isinstance(m, OutboundText)]

    @property
    def documents(self) -> List[OutboundDocument]:
        return [m for m in self.messages if isinstance(m, OutboundDocument)]


@pytest.fixture
def command_repository():
    """Создать хранилище команд в памяти."""
    return InMemoryCommandRepository()


@pytest.fixture
def registry_provider():
    """Создать mock провайдера реестра."""
    return AsyncMock(spec=IRegistryProvider)


@pytest.fixture
def reply():
    """Создать сборщик ответов."""
    return ReplyCollector()


@pytest.fixture
def slow_command_repository():
    """Хранилище команд, уступающее управление внутри каждой операции."""
    return InMemoryCommandRepository(delay=0.001)
