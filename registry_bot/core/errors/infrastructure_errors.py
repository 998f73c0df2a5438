"""
Инфраструктурные исключения.

Исключения для ошибок работы с внешними системами и инфраструктурой.
"""

from typing import Optional, Dict, Any
from .base import InfrastructureError


class RepositoryError(InfrastructureError):
    """
    Исключение: ошибка работы с репозиторием.

    Выбрасывается при ошибках доступа к хранилищу последних команд.

    Пример:
        >>> raise RepositoryError(
        ...     operation="save_last",
        ...     entity_type="LastCommand",
        ...     reason="database is locked"
        ... )
    """

    def __init__(
        self,
        operation: str,
        entity_type: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция (get_last, save_last)
            entity_type: Тип сущности
            reason: Причина ошибки
            details: Дополнительные детали
        """
        message = (
            f"Ошибка репозитория при операции '{operation}' "
            f"с {entity_type}: {reason}"
        )
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "entity_type": entity_type,
                "reason": reason,
                **(details or {})
            },
            error_code="REPOSITORY_ERROR"
        )


class RegistryProviderError(InfrastructureError):
    """
    Исключение: API реестра компаний недоступно.

    Пример:
        >>> raise RegistryProviderError(
        ...     operation="lookup_company",
        ...     reason="Service unavailable",
        ...     status_code=503
        ... )
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"Ошибка API реестра при операции '{operation}': {reason}"
        if status_code:
            message += f" (HTTP {status_code})"

        super().__init__(
            message=message,
            details={
                "operation": operation,
                "reason": reason,
                "status_code": status_code,
                **(details or {})
            },
            error_code="REGISTRY_PROVIDER_ERROR"
        )


class GatewayError(InfrastructureError):
    """
    Исключение: ошибка транспорта мессенджера (Telegram Bot API).

    Выбрасывается при сетевых ошибках и ответах с ok=false.

    Пример:
        >>> raise GatewayError(
        ...     operation="getUpdates",
        ...     reason="Conflict: terminated by other getUpdates request",
        ...     status_code=409
        ... )
    """

    def __init__(
        self,
        operation: str,
        reason: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"Ошибка Telegram Bot API при вызове '{operation}': {reason}"
        if status_code:
            message += f" (HTTP {status_code})"

        super().__init__(
            message=message,
            details={
                "operation": operation,
                "reason": reason,
                "status_code": status_code,
                **(details or {})
            },
            error_code="GATEWAY_ERROR"
        )
