"""
Port для шлюза мессенджера.

Определяет контракт получения обновлений и отправки сообщений.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, BinaryIO

from ..entities.update import ChatRef, Update


class IMessagingGateway(ABC):
    """
    Port (интерфейс) для шлюза мессенджера.

    receive_updates() - бесконечный асинхронный поток обновлений
    (long-poll или push, на усмотрение реализации). Ошибки транспорта
    выбрасываются из итератора как GatewayError; после такой ошибки
    вызывающий создает новый итератор.

    Examples:
        >>> async for update in gateway.receive_updates():
        ...     if isinstance(update, TextMessage):
        ...         await gateway.send_text(update.chat_ref, "pong")
    """

    @abstractmethod
    def receive_updates(self) -> AsyncIterator[Update]:
        """Подписаться на входящие обновления."""
        pass

    @abstractmethod
    async def send_text(self, chat_ref: ChatRef, text: str, parse_mode: str = "HTML") -> None:
        """
        Отправить текстовое сообщение.

        Args:
            chat_ref: Идентификатор чата
            text: Текст сообщения
            parse_mode: Режим разметки

        Raises:
            GatewayError: При ошибке транспорта (повтор не выполняется)
        """
        pass

    @abstractmethod
    async def send_document(self, chat_ref: ChatRef, filename: str, content: BinaryIO) -> None:
        """
        Отправить файл.

        Args:
            chat_ref: Идентификатор чата
            filename: Имя файла, которое увидит пользователь
            content: Поток с содержимым файла
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Закрыть соединение с мессенджером."""
        pass
