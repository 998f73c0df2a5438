"""
API схемы для приема обновлений Telegram.
"""

from pydantic import BaseModel, Field


class WebhookAck(BaseModel):
    """Подтверждение приема обновления (Telegram ожидает ответ 200)."""

    ok: bool = Field(default=True, description="Обновление поставлено в очередь")
