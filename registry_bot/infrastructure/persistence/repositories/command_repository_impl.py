"""
Реализация CommandRepository с использованием SQLAlchemy.

Каждая операция выполняется в собственной сессии БД и фиксируется
до возврата управления.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ....core.errors import RepositoryError
from ....domain.entities import ChatRef
from ....domain.repositories import CommandRepository
from ..models import LastCommandModel

logger = logging.getLogger("registry-bot.infrastructure.command_repository")


class CommandRepositoryImpl(CommandRepository):
    """
    Реализация репозитория последних команд для SQLAlchemy.

    Атрибуты:
        _session_factory: Фабрика сессий БД

    Пример:
        >>> repo = CommandRepositoryImpl(async_session_maker)
        >>> await repo.save_last(42, "/okved 7707083893")
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Args:
            session_factory: Фабрика асинхронных сессий SQLAlchemy
        """
        self._session_factory = session_factory

    async def get_last(self, session_id: ChatRef) -> Optional[str]:
        key = str(session_id)
        try:
            async with self._session_factory() as db:
                result = await db.execute(
                    select(LastCommandModel).where(LastCommandModel.session_id == key)
                )
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(
                operation="get_last",
                entity_type="LastCommand",
                reason=str(e),
                details={"session_id": key}
            ) from e

        if model is None:
            logger.debug(f"No last command for session {key}")
            return None
        return model.text

    async def save_last(self, session_id: ChatRef, text: str) -> None:
        key = str(session_id)
        async with self._session_factory() as db:
            try:
                result = await db.execute(
                    select(LastCommandModel).where(LastCommandModel.session_id == key)
                )
                model = result.scalar_one_or_none()

                if model is None:
                    db.add(LastCommandModel(session_id=key, text=text))
                    logger.info(f"Created last command record for session {key}")
                else:
                    model.text = text
                    model.updated_at = datetime.now(timezone.utc)
                    logger.debug(f"Updated last command for session {key}")

                await db.commit()
            except SQLAlchemyError as e:
                await db.rollback()
                raise RepositoryError(
                    operation="save_last",
                    entity_type="LastCommand",
                    reason=str(e),
                    details={"session_id": key}
                ) from e
