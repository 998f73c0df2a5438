import logging
from typing import Any, Dict, Optional

import httpx

from ...core.errors import GatewayError

logger = logging.getLogger("registry-bot.infrastructure.telegram.api")


class TelegramBotApi:
    """
    Тонкая обертка над Telegram Bot API (через REST API).

    Любая сетевая ошибка или ответ с ok=false превращается в GatewayError.
    Токен бота не попадает ни в логи, ни в тексты исключений.
    """

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._token = token
        self._base_url = f"{api_url.rstrip('/')}/bot{token}"
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def call(
        self,
        method: str,
        payload: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Вызвать метод Bot API и вернуть поле result.

        С files запрос уходит как multipart/form-data, иначе как JSON.
        """
        kwargs: Dict[str, Any] = {}
        if files:
            kwargs["data"] = payload or {}
            kwargs["files"] = files
        else:
            kwargs["json"] = payload or {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        logger.debug(f"[TelegramBotApi] POST {method}")
        try:
            response = await self._client.post(f"{self._base_url}/{method}", **kwargs)
        except httpx.HTTPError as e:
            raise GatewayError(operation=method, reason=self._redact(str(e)) or type(e).__name__) from e

        try:
            body = response.json()
        except ValueError as e:
            raise GatewayError(
                operation=method,
                reason="Invalid JSON in response",
                status_code=response.status_code,
            ) from e

        if not body.get("ok"):
            raise GatewayError(
                operation=method,
                reason=body.get("description") or "unknown error",
                status_code=body.get("error_code") or response.status_code,
            )
        return body.get("result")

    async def close(self) -> None:
        await self._client.aclose()

    def _redact(self, text: str) -> str:
        return text.replace(f"bot{self._token}", "bot***") if self._token else text
