"""
Роутер приема обновлений Telegram в режиме webhook.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Request

from ..schemas.webhook_schemas import WebhookAck
from ....infrastructure.telegram import WebhookTelegramGateway

logger = logging.getLogger("registry-bot.api.webhook")

router = APIRouter(prefix="/telegram", tags=["telegram"])


@router.post("/webhook", response_model=WebhookAck)
async def telegram_webhook(request: Request, update: Dict[str, Any] = Body(...)) -> WebhookAck:
    """
    Принять обновление от Telegram и поставить его в очередь шлюза.

    Обработка выполняется циклом обновлений асинхронно, поэтому
    Telegram сразу получает подтверждение.
    """
    runtime = getattr(request.app.state, "runtime", None)
    gateway = getattr(runtime, "gateway", None)
    if not isinstance(gateway, WebhookTelegramGateway):
        raise HTTPException(status_code=404, detail="Webhook delivery is disabled")

    parsed = gateway.push(update)
    logger.debug(f"Webhook update {parsed.update_id} queued ({parsed.kind})")
    return WebhookAck(ok=True)
