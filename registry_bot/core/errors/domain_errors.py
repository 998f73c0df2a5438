"""
Доменные исключения.

Исключения для ошибок бизнес-логики поиска компаний.
"""

from typing import Optional, Dict, Any
from .base import DomainError


class CompanyNotFoundError(DomainError):
    """
    Исключение: компания не найдена.

    Выбрасывается провайдером реестра, когда ИНН не соответствует
    ни одной компании или соответствует нескольким.

    Пример:
        >>> raise CompanyNotFoundError("7707083893", matches=0)
    """

    def __init__(
        self,
        tax_id: str,
        matches: int = 0,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            tax_id: ИНН, по которому выполнялся поиск
            matches: Количество найденных совпадений (0 или больше 1)
            details: Дополнительные детали
        """
        message = f"Компания с ИНН '{tax_id}' не найдена (совпадений: {matches})"
        super().__init__(
            message=message,
            details={"tax_id": tax_id, "matches": matches, **(details or {})},
            error_code="COMPANY_NOT_FOUND"
        )
        self.tax_id = tax_id
