"""
Провайдер реестра компаний на основе публичного API vbankcenter.ru.
"""

import io
import logging
from typing import Any, BinaryIO, Dict, List, Optional

import httpx

from ...core.config import settings
from ...core.errors import CompanyNotFoundError, RegistryProviderError
from ...domain.entities import ActivityEntry, CompanyInfo
from ...domain.ports import IRegistryProvider

logger = logging.getLogger("registry-bot.infrastructure.vbank_provider")


class VBankRegistryProvider(IRegistryProvider):
    """
    Инкапсулирует общение с API контрагентов vbankcenter.ru.

    Каждый запрос начинается с поиска компании по ИНН: API ищет по
    подстроке, поэтому совпадение проверяется по полю inn, в котором
    найденный ИНН обернут в <em>...</em>. Требуется ровно одно совпадение.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_url = (api_url or settings.registry_api_url).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.request_timeout)

    async def lookup_company(self, tax_id: str) -> CompanyInfo:
        company = await self._find_company(tax_id)
        return CompanyInfo(
            name=company.get("fullName") or "",
            address=company.get("address") or "",
        )

    async def lookup_activities(self, tax_id: str) -> List[ActivityEntry]:
        company = await self._find_company(tax_id)
        data = await self._get_json(
            "lookup_activities",
            f"/counterparty/type/legal/uuid/{company['partnerUuid']}/activityTypes",
            params={"page": 0, "size": 100, "inn": tax_id},
        )
        return [
            ActivityEntry(code=item.get("code") or "", activity_type=item.get("name") or "")
            for item in data.get("content") or []
        ]

    async def lookup_document(self, tax_id: str) -> BinaryIO:
        company = await self._find_company(tax_id)
        response = await self._get(
            "lookup_document",
            f"/counterparty/type/legal/uuid/{company['partnerUuid']}/pdf",
        )
        logger.debug(f"[VBankRegistryProvider] Document for {tax_id}: {len(response.content)} bytes")
        return io.BytesIO(response.content)

    async def close(self) -> None:
        await self._client.aclose()

    async def _find_company(self, tax_id: str) -> Dict[str, Any]:
        """
        Найти краткую карточку компании по ИНН.

        Raises:
            CompanyNotFoundError: Нет совпадений или их несколько
        """
        data = await self._get_json(
            "search",
            "/counterparty/filter",
            params={"page": 0, "size": 20, "searchStr": tax_id, "withCounter": "true"},
        )
        marker = f"<em>{tax_id}</em>"
        matches = [item for item in data.get("content") or [] if item.get("inn") == marker]

        if len(matches) != 1:
            logger.info(f"[VBankRegistryProvider] {len(matches)} matches for {tax_id}")
            raise CompanyNotFoundError(tax_id, matches=len(matches))
        return matches[0]

    async def _get_json(self, operation: str, path: str, params: Optional[dict] = None) -> Dict[str, Any]:
        response = await self._get(operation, path, params)
        try:
            data = response.json()
        except ValueError as e:
            raise RegistryProviderError(operation=operation, reason=f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise RegistryProviderError(operation=operation, reason="Unexpected response shape")
        return data

    async def _get(self, operation: str, path: str, params: Optional[dict] = None) -> httpx.Response:
        url = f"{self.api_url}{path}"
        logger.debug(f"[VBankRegistryProvider] GET {url} params={params}")
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RegistryProviderError(
                operation=operation,
                reason=e.response.reason_phrase,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"[VBankRegistryProvider] Exception in {operation}: {e}")
            raise RegistryProviderError(operation=operation, reason=str(e) or type(e).__name__) from e
        return response
