"""
Telegram Bot API: HTTP-клиент, разбор обновлений и шлюзы.
"""

from .api import TelegramBotApi
from .update_parser import parse_update
from .gateway import TelegramGateway, PollingTelegramGateway, WebhookTelegramGateway

__all__ = [
    "TelegramBotApi",
    "parse_update",
    "TelegramGateway",
    "PollingTelegramGateway",
    "WebhookTelegramGateway",
]
