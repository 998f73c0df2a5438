"""
Port для провайдера реестра компаний.

Определяет контракт для получения данных о компании по ИНН.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, List

from ..entities.company import ActivityEntry, CompanyInfo


class IRegistryProvider(ABC):
    """
    Port (интерфейс) для провайдера реестра компаний.

    Все методы выбрасывают CompanyNotFoundError, если ИНН не соответствует
    ровно одной компании, и RegistryProviderError при ошибках транспорта.

    Реализации этого интерфейса находятся в infrastructure слое.

    Examples:
        >>> provider = VBankRegistryProvider(api_url="https://vbankcenter.ru/contragent/api/web")
        >>> info = await provider.lookup_company("7707083893")
        >>> print(info.name)
    """

    @abstractmethod
    async def lookup_company(self, tax_id: str) -> CompanyInfo:
        """
        Получить наименование и адрес компании.

        Args:
            tax_id: ИНН компании

        Returns:
            CompanyInfo

        Raises:
            CompanyNotFoundError: Компания не найдена или найдено несколько
            RegistryProviderError: API реестра недоступно
        """
        pass

    @abstractmethod
    async def lookup_activities(self, tax_id: str) -> List[ActivityEntry]:
        """
        Получить виды деятельности компании по ОКВЭД.

        Порядок элементов не гарантируется.
        """
        pass

    @abstractmethod
    async def lookup_document(self, tax_id: str) -> BinaryIO:
        """
        Получить выписку из ЕГРЮЛ (PDF).

        Returns:
            Поток с содержимым файла; вызывающий закрывает его после чтения
        """
        pass

    async def close(self) -> None:
        """Освободить сетевые ресурсы провайдера."""
        return None
