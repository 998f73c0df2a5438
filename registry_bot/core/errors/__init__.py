"""
Кастомные исключения для Registry Bot.

Этот модуль содержит иерархию исключений для различных
ошибочных ситуаций в системе.
"""

from .base import (
    BotError,
    DomainError,
    InfrastructureError,
    ApplicationError
)

from .domain_errors import CompanyNotFoundError

from .infrastructure_errors import (
    RepositoryError,
    RegistryProviderError,
    GatewayError
)


class ConfigurationError(ApplicationError):
    """Исключение: обязательная настройка не задана."""

    def __init__(self, setting: str):
        super().__init__(
            message=f"Настройка '{setting}' не задана",
            details={"setting": setting},
            error_code="CONFIGURATION_ERROR"
        )


__all__ = [
    # Базовые исключения
    "BotError",
    "DomainError",
    "InfrastructureError",
    "ApplicationError",
    "ConfigurationError",

    # Доменные исключения
    "CompanyNotFoundError",

    # Инфраструктурные исключения
    "RepositoryError",
    "RegistryProviderError",
    "GatewayError",
]
