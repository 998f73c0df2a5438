"""
Unit тесты для SessionUpdateLoop.

Использует шлюз в памяти вместо Telegram.
"""

import asyncio
import io
from typing import List

import pytest

from registry_bot.application.commands import CommandDispatcher, DispatchStatus
from registry_bot.application.commands import messages
from registry_bot.application.update_loop import SessionUpdateLoop
from registry_bot.core.errors import GatewayError, RegistryProviderError
from registry_bot.domain.entities import NonTextMessage, OtherUpdate, TextMessage
from registry_bot.domain.ports import IMessagingGateway


class FakeGateway(IMessagingGateway):
    """
    Шлюз в памяти.

    Каждый вызов receive_updates() берет следующий элемент batches:
    список обновлений выдается и поток заканчивается, исключение
    выбрасывается. С block=True поток после выдачи не заканчивается.
    """

    def __init__(self, batches, block: bool = False):
        self._batches = list(batches)
        self._block = block
        self.sent: List[tuple] = []
        self.subscriptions = 0
        self.closed = False

    async def receive_updates(self):
        self.subscriptions += 1
        batch = self._batches.pop(0) if self._batches else []
        if isinstance(batch, Exception):
            raise batch
        for update in batch:
            yield update
        if self._block:
            await asyncio.Event().wait()

    async def send_text(self, chat_ref, text, parse_mode="HTML"):
        self.sent.append((chat_ref, text))

    async def send_document(self, chat_ref, filename, content):
        self.sent.append((chat_ref, filename, content.read()))

    async def close(self):
        self.closed = True


class RecordingDispatcher:
    """Записывает начало и конец обработки каждого сообщения."""

    def __init__(self):
        self.events = []

    async def dispatch(self, session_id, text, reply):
        self.events.append(("start", session_id, text))
        await asyncio.sleep(0.01)
        self.events.append(("end", session_id, text))
        return DispatchStatus.ACCEPTED


def text(update_id, chat_ref, value):
    return TextMessage(update_id=update_id, chat_ref=chat_ref, text=value)


@pytest.fixture
def dispatcher(command_repository, registry_provider):
    return CommandDispatcher(command_repository, registry_provider)


async def run_until_exhausted(loop: SessionUpdateLoop):
    await asyncio.wait_for(loop.run(asyncio.Event()), timeout=5)


class TestSessionUpdateLoop:

    @pytest.mark.asyncio
    async def test_text_message_dispatched(self, dispatcher):
        gateway = FakeGateway([[text(1, 42, "/help")]])
        loop = SessionUpdateLoop(gateway, dispatcher)

        await run_until_exhausted(loop)

        assert gateway.sent == [(42, messages.HELP)]
        assert gateway.closed
        assert loop.in_flight == 0

    @pytest.mark.asyncio
    async def test_non_text_message_gets_warning(self, dispatcher, command_repository):
        gateway = FakeGateway([[NonTextMessage(update_id=1, chat_ref=42, content_type="photo")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert gateway.sent == [(42, messages.TEXT_ONLY)]
        assert command_repository.saved == {}

    @pytest.mark.asyncio
    async def test_other_update_is_dropped(self, dispatcher):
        gateway = FakeGateway([[OtherUpdate(update_id=1, update_type="edited_message")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert gateway.sent == []

    @pytest.mark.asyncio
    async def test_document_relayed(self, dispatcher, registry_provider):
        registry_provider.lookup_document.return_value = io.BytesIO(b"%PDF")
        gateway = FakeGateway([[text(1, 42, "/egrul 7707083893")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert gateway.sent == [(42, "7707083893.pdf", b"%PDF")]

    @pytest.mark.asyncio
    async def test_failed_update_does_not_stop_loop(self, dispatcher, registry_provider):
        registry_provider.lookup_company.side_effect = RegistryProviderError(
            operation="search",
            reason="timeout",
        )
        gateway = FakeGateway([[text(1, 42, "/inn 7707083893"), text(2, 42, "/help")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert gateway.sent == [(42, messages.HELP)]

    @pytest.mark.asyncio
    async def test_resubscribes_after_gateway_error(self, dispatcher):
        gateway = FakeGateway([
            GatewayError(operation="getUpdates", reason="Bad Gateway", status_code=502),
            [text(1, 42, "/start")],
        ])
        loop = SessionUpdateLoop(gateway, dispatcher, reconnect_backoff=0)

        await run_until_exhausted(loop)

        assert gateway.subscriptions == 2
        assert gateway.sent == [(42, messages.START)]

    @pytest.mark.asyncio
    async def test_stop_event_ends_blocked_loop(self, dispatcher):
        gateway = FakeGateway([[text(1, 42, "/help")]], block=True)
        loop = SessionUpdateLoop(gateway, dispatcher)
        stop_event = asyncio.Event()

        task = asyncio.create_task(loop.run(stop_event))
        for _ in range(100):
            if gateway.sent:
                break
            await asyncio.sleep(0.01)
        stop_event.set()
        await asyncio.wait_for(task, timeout=5)

        assert gateway.sent == [(42, messages.HELP)]
        assert gateway.closed

    @pytest.mark.asyncio
    async def test_stop_during_backoff(self, dispatcher):
        gateway = FakeGateway([GatewayError(operation="getUpdates", reason="down")] * 3)
        loop = SessionUpdateLoop(gateway, dispatcher, reconnect_backoff=60)
        stop_event = asyncio.Event()

        task = asyncio.create_task(loop.run(stop_event))
        await asyncio.sleep(0.05)
        stop_event.set()
        await asyncio.wait_for(task, timeout=5)

        assert gateway.subscriptions == 1
        assert gateway.closed

    @pytest.mark.asyncio
    async def test_same_chat_processed_in_order(self):
        dispatcher = RecordingDispatcher()
        gateway = FakeGateway([[text(1, 42, "a"), text(2, 42, "b")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert dispatcher.events == [
            ("start", 42, "a"),
            ("end", 42, "a"),
            ("start", 42, "b"),
            ("end", 42, "b"),
        ]

    @pytest.mark.asyncio
    async def test_different_chats_processed_concurrently(self):
        dispatcher = RecordingDispatcher()
        gateway = FakeGateway([[text(1, 1, "a"), text(2, 2, "b")]])

        await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert dispatcher.events[:2] == [("start", 1, "a"), ("start", 2, "b")]

    @pytest.mark.asyncio
    async def test_other_receive_errors_propagate(self, dispatcher):
        gateway = FakeGateway([RuntimeError("broken stream")])

        with pytest.raises(RuntimeError):
            await run_until_exhausted(SessionUpdateLoop(gateway, dispatcher))

        assert gateway.closed
