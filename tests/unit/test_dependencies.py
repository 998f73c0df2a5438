"""
Unit тесты для сборки компонентов бота.
"""

import pytest

from registry_bot.core.config import Settings
from registry_bot.core.dependencies import build_runtime
from registry_bot.core.errors import ConfigurationError
from registry_bot.infrastructure.persistence.database import close_db
from registry_bot.infrastructure.telegram import PollingTelegramGateway, WebhookTelegramGateway


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "bot_token": "test-token",
        "db_url": f"sqlite:///{tmp_path}/registry_bot.db",
    }
    values.update(overrides)
    return Settings(**values)


async def shutdown(runtime):
    await runtime.store.close()
    await runtime.provider.close()
    await runtime.gateway.close()
    await close_db()


def test_missing_token(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        build_runtime(make_settings(tmp_path, bot_token=""))

    assert exc_info.value.details == {"setting": "bot_token"}


@pytest.mark.asyncio
async def test_polling_runtime(tmp_path):
    runtime = build_runtime(make_settings(tmp_path))

    try:
        assert isinstance(runtime.gateway, PollingTelegramGateway)
        assert runtime.dispatcher.is_known("/inn")
    finally:
        await shutdown(runtime)


@pytest.mark.asyncio
async def test_webhook_runtime(tmp_path):
    runtime = build_runtime(make_settings(
        tmp_path,
        delivery_mode="webhook",
        webhook_url="https://bot.example.com/telegram/webhook",
    ))

    try:
        assert isinstance(runtime.gateway, WebhookTelegramGateway)
    finally:
        await shutdown(runtime)
