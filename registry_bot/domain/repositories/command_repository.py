"""
Интерфейс хранилища последних команд.

Для каждого чата хранится ровно одна последняя принятая команда.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.update import ChatRef


class CommandRepository(ABC):
    """
    Интерфейс репозитория последних команд.

    Пример:
        >>> await repository.save_last(42, "/inn 7707083893")
        >>> await repository.get_last(42)
        '/inn 7707083893'
    """

    @abstractmethod
    async def get_last(self, session_id: ChatRef) -> Optional[str]:
        """
        Получить последнюю принятую команду чата.

        Args:
            session_id: Идентификатор чата

        Returns:
            Текст команды или None, если команд еще не было
        """
        pass

    @abstractmethod
    async def save_last(self, session_id: ChatRef, text: str) -> None:
        """
        Сохранить последнюю принятую команду чата.

        Создает запись, если ее нет, иначе перезаписывает текст.
        Изменение зафиксировано (commit) к моменту возврата.

        Args:
            session_id: Идентификатор чата
            text: Исходный текст команды

        Raises:
            RepositoryError: Хранилище недоступно
        """
        pass
