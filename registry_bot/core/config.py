"""Application configuration"""

import logging
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_BOT__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Telegram
    bot_token: str = ""
    telegram_api_url: str = "https://api.telegram.org"
    delivery_mode: Literal["polling", "webhook"] = "polling"
    webhook_url: Optional[str] = None
    poll_timeout: int = 30  # long-poll seconds for getUpdates

    # Shown by /hello
    author_name: str = "Registry Bot"
    author_email: Optional[str] = None
    author_url: Optional[str] = None

    # Registry provider
    registry_api_url: str = "https://vbankcenter.ru/contragent/api/web"
    request_timeout: float = 30.0

    # Database
    db_url: str = "sqlite:///data/registry_bot.db"

    # Service
    port: int = 8010
    log_level: str = "INFO"
    version: str = "0.1.0"

    @property
    def is_webhook(self) -> bool:
        """Check if updates are pushed by Telegram instead of polled"""
        return self.delivery_mode == "webhook"


# Create settings instance
settings = Settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("registry-bot")
