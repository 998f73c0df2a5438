"""
Сборка компонентов бота из настроек.
"""

import logging
from dataclasses import dataclass

from .config import Settings
from .errors import ConfigurationError
from ..application.commands import CommandDispatcher
from ..application.commands.messages import render_hello
from ..application.update_loop import SessionUpdateLoop
from ..domain.ports import IRegistryProvider
from ..infrastructure.persistence.command_store import SerializedCommandStore
from ..infrastructure.persistence.database import init_database
from ..infrastructure.persistence.repositories import CommandRepositoryImpl
from ..infrastructure.registry import VBankRegistryProvider
from ..infrastructure.telegram import (
    PollingTelegramGateway,
    TelegramBotApi,
    TelegramGateway,
    WebhookTelegramGateway,
)

logger = logging.getLogger("registry-bot.core.dependencies")


@dataclass
class BotRuntime:
    """Связанные между собой компоненты запущенного бота."""

    gateway: TelegramGateway
    provider: IRegistryProvider
    store: SerializedCommandStore
    dispatcher: CommandDispatcher
    update_loop: SessionUpdateLoop


def build_runtime(settings: Settings) -> BotRuntime:
    """
    Создать все компоненты бота.

    Инициализирует движок БД, но не создает таблицы и не обращается
    к сети: это делает lifespan приложения.

    Args:
        settings: Настройки приложения

    Returns:
        BotRuntime

    Raises:
        ConfigurationError: Не задан токен бота
    """
    if not settings.bot_token:
        raise ConfigurationError("bot_token")

    session_maker = init_database(settings.db_url)

    api = TelegramBotApi(
        token=settings.bot_token,
        api_url=settings.telegram_api_url,
        timeout=settings.request_timeout,
    )
    if settings.is_webhook:
        gateway: TelegramGateway = WebhookTelegramGateway(api, webhook_url=settings.webhook_url)
    else:
        gateway = PollingTelegramGateway(api, poll_timeout=settings.poll_timeout)

    provider = VBankRegistryProvider(
        api_url=settings.registry_api_url,
        timeout=settings.request_timeout,
    )
    store = SerializedCommandStore(CommandRepositoryImpl(session_maker))
    dispatcher = CommandDispatcher(
        store,
        provider,
        hello_text=render_hello(settings.author_name, settings.author_email, settings.author_url),
    )
    update_loop = SessionUpdateLoop(gateway, dispatcher)

    logger.info(f"Bot runtime built (delivery_mode={settings.delivery_mode})")
    return BotRuntime(
        gateway=gateway,
        provider=provider,
        store=store,
        dispatcher=dispatcher,
        update_loop=update_loop,
    )
