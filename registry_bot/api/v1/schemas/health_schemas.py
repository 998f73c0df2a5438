"""
API схемы для health check.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Ответ health check endpoint.

    Пример:
        {
            "status": "healthy",
            "service": "registry-bot",
            "version": "0.1.0",
            "delivery_mode": "polling"
        }
    """

    status: str = Field(description="Статус сервиса")
    service: str = Field(description="Название сервиса")
    version: str = Field(description="Версия сервиса")
    delivery_mode: str = Field(description="Способ получения обновлений Telegram")
