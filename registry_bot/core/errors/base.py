"""
Базовые исключения для Registry Bot.

Определяет иерархию исключений для различных слоев приложения.
"""

from typing import Optional, Dict, Any


class BotError(Exception):
    """
    Базовое исключение для всех ошибок Registry Bot.

    Все кастомные исключения должны наследоваться от этого класса.

    Атрибуты:
        message: Сообщение об ошибке
        details: Дополнительные детали ошибки
        error_code: Код ошибки для идентификации

    Пример:
        >>> try:
        ...     raise BotError("Something went wrong")
        ... except BotError as e:
        ...     print(f"Error: {e}")
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        """
        Args:
            message: Сообщение об ошибке
            details: Дополнительные детали (опционально)
            error_code: Код ошибки (опционально)
        """
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Преобразовать исключение в словарь для логирования.

        Returns:
            Словарь с информацией об ошибке
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class DomainError(BotError):
    """
    Базовое исключение для ошибок доменного слоя.

    Такие ошибки обрабатываются в диспетчере и показываются
    пользователю как сообщение в чате.
    """
    pass


class InfrastructureError(BotError):
    """
    Базовое исключение для ошибок инфраструктурного слоя.

    Используется для ошибок работы с внешними системами:
    база данных, Telegram Bot API, API реестра.
    """
    pass


class ApplicationError(BotError):
    """
    Базовое исключение для ошибок прикладного слоя.

    Пример:
        >>> raise ApplicationError("Bot token is not configured")
    """
    pass
