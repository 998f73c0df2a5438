"""
Unit тесты для SerializedCommandStore.
"""

import asyncio

import pytest

from registry_bot.core.errors import RepositoryError
from registry_bot.infrastructure.persistence.command_store import SerializedCommandStore


class FailingRepository:
    async def get_last(self, session_id):
        raise RepositoryError(operation="get_last", entity_type="LastCommand", reason="database is locked")

    async def save_last(self, session_id, text):
        raise RepositoryError(operation="save_last", entity_type="LastCommand", reason="disk I/O error")


class TestSerializedCommandStore:

    @pytest.mark.asyncio
    async def test_save_and_get(self, command_repository):
        store = SerializedCommandStore(command_repository)

        await store.save_last(42, "/inn 7707083893")

        assert await store.get_last(42) == "/inn 7707083893"
        assert await store.get_last(7) is None
        await store.close()

    @pytest.mark.asyncio
    async def test_operations_run_one_at_a_time(self, slow_command_repository):
        store = SerializedCommandStore(slow_command_repository)

        await asyncio.gather(*(store.save_last(i % 3, f"/help {i}") for i in range(20)))

        assert slow_command_repository.max_active == 1
        assert len(slow_command_repository.save_calls) == 20
        await store.close()

    @pytest.mark.asyncio
    async def test_operations_keep_submission_order(self, command_repository):
        store = SerializedCommandStore(command_repository)

        await asyncio.gather(
            store.save_last(42, "/start"),
            store.save_last(42, "/help"),
            store.save_last(42, "/okved 7707083893"),
        )

        assert await store.get_last(42) == "/okved 7707083893"
        await store.close()

    @pytest.mark.asyncio
    async def test_repository_error_reaches_caller(self):
        store = SerializedCommandStore(FailingRepository())

        with pytest.raises(RepositoryError):
            await store.save_last(42, "/help")
        with pytest.raises(RepositoryError):
            await store.get_last(42)
        await store.close()

    @pytest.mark.asyncio
    async def test_close_finishes_pending_operations(self, slow_command_repository):
        store = SerializedCommandStore(slow_command_repository)

        pending = [asyncio.create_task(store.save_last(42, f"/help {i}")) for i in range(5)]
        await asyncio.sleep(0)
        await store.close()

        await asyncio.gather(*pending)
        assert len(slow_command_repository.save_calls) == 5

    @pytest.mark.asyncio
    async def test_closed_store_rejects_operations(self, command_repository):
        store = SerializedCommandStore(command_repository)
        await store.close()

        with pytest.raises(RuntimeError):
            await store.get_last(42)
