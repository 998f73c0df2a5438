"""
Диспетчер команд бота.

Сопоставляет команду обработчику, сохраняет последнюю принятую команду
чата, повторяет ее по /last и выполняет поиск по каждому ИНН отдельно.
"""

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from ...core.errors import CompanyNotFoundError
from ...domain.entities import (
    ActivityEntry,
    ChatRef,
    CompanyInfo,
    OutboundDocument,
    OutboundMessage,
    OutboundText,
)
from ...domain.ports import IRegistryProvider
from ...domain.repositories import CommandRepository
from ...domain.value_objects import is_valid_tax_id
from . import messages
from .context import DIRECT, DirectDispatch, DispatchContext, ReplayedDispatch
from .parser import parse_command

logger = logging.getLogger("registry-bot.application.dispatcher")

# Отправка одного исходящего сообщения в чат, из которого пришла команда
Reply = Callable[[OutboundMessage], Awaitable[None]]

_Fetch = Callable[[str], Awaitable[Any]]
_Render = Callable[[str, Any], OutboundMessage]

LAST_COMMAND = "/last"


class DispatchStatus(str, Enum):
    """Итог обработки одной команды (для логов и тестов)."""

    ACCEPTED = "accepted"
    REPLAYED = "replayed"
    NOTHING_TO_REPLAY = "nothing_to_replay"
    UNKNOWN_COMMAND = "unknown_command"


class CommandDispatcher:
    """
    Диспетчер команд.

    Правила:
    - распознанная команда при DirectDispatch сохраняется в хранилище
      до выполнения обработчика, независимо от результата по аргументам;
    - /last загружает сохраненную команду и выполняет ее с ReplayedDispatch,
      поэтому ни /last, ни повтор не перезаписывают хранилище;
    - ошибки формата ИНН и "компания не найдена" сообщаются в чат по
      каждому аргументу и не прерывают обработку остальных;
    - ошибки транспорта и хранилища пробрасываются вызывающему.

    Атрибуты:
        _store: Хранилище последних команд
        _provider: Провайдер реестра компаний
        _static_replies: Ответы информационных команд
        _lookups: Команды поиска по ИНН: (получение данных, форматирование)

    Пример:
        >>> dispatcher = CommandDispatcher(store, provider, hello_text="...")
        >>> await dispatcher.dispatch(42, "/inn 7707083893", reply)
        <DispatchStatus.ACCEPTED: 'accepted'>
    """

    def __init__(
        self,
        store: CommandRepository,
        provider: IRegistryProvider,
        hello_text: Optional[str] = None,
    ):
        """
        Args:
            store: Хранилище последних команд
            provider: Провайдер реестра компаний
            hello_text: Ответ на /hello
        """
        self._store = store
        self._provider = provider
        self._static_replies: Dict[str, str] = {
            "/start": messages.START,
            "/help": messages.HELP,
            "/hello": hello_text or messages.render_hello("Registry Bot"),
        }
        self._lookups: Dict[str, Tuple[_Fetch, _Render]] = {
            "/inn": (provider.lookup_company, self._render_company),
            "/okved": (provider.lookup_activities, self._render_activities),
            "/egrul": (provider.lookup_document, self._render_document),
        }

    def is_known(self, token: str) -> bool:
        return token == LAST_COMMAND or token in self._static_replies or token in self._lookups

    async def dispatch(
        self,
        session_id: ChatRef,
        text: str,
        reply: Reply,
        context: DispatchContext = DIRECT,
    ) -> DispatchStatus:
        """
        Обработать текст сообщения.

        Args:
            session_id: Идентификатор чата
            text: Исходный текст сообщения
            reply: Отправка ответа в чат
            context: DirectDispatch или ReplayedDispatch

        Returns:
            DispatchStatus

        Raises:
            RepositoryError: Хранилище недоступно
            RegistryProviderError, GatewayError: Ошибки транспорта
        """
        command = parse_command(text)

        if command.token == LAST_COMMAND:
            if isinstance(context, ReplayedDispatch):
                logger.warning(f"[{session_id}] Nested replay of {context.original_text!r} rejected")
                await reply(OutboundText(text=messages.UNKNOWN_COMMAND))
                return DispatchStatus.UNKNOWN_COMMAND
            return await self._replay(session_id, reply)

        if not self.is_known(command.token):
            logger.info(f"[{session_id}] Unknown command {command.token[:64]!r}")
            await reply(OutboundText(text=messages.UNKNOWN_COMMAND))
            return DispatchStatus.UNKNOWN_COMMAND

        if isinstance(context, DirectDispatch):
            await self._store.save_last(session_id, text)

        logger.info(f"[{session_id}] Dispatching {command.token} ({context.kind}, {len(command.args)} args)")
        static_reply = self._static_replies.get(command.token)
        if static_reply is not None:
            await reply(OutboundText(text=static_reply))
        else:
            fetch, render = self._lookups[command.token]
            await self._for_each_tax_id(session_id, command.args, reply, fetch, render)

        if isinstance(context, ReplayedDispatch):
            return DispatchStatus.REPLAYED
        return DispatchStatus.ACCEPTED

    async def _replay(self, session_id: ChatRef, reply: Reply) -> DispatchStatus:
        last_text = await self._store.get_last(session_id)
        if last_text is None:
            await reply(OutboundText(text=messages.NO_PRIOR_COMMAND))
            return DispatchStatus.NOTHING_TO_REPLAY

        logger.info(f"[{session_id}] Replaying last command")
        return await self.dispatch(
            session_id,
            last_text,
            reply,
            ReplayedDispatch(original_text=last_text),
        )

    async def _for_each_tax_id(
        self,
        session_id: ChatRef,
        tax_ids: Sequence[str],
        reply: Reply,
        fetch: _Fetch,
        render: _Render,
    ) -> None:
        # Предупреждение не прерывает обработку: цикл ниже просто пуст
        if not tax_ids:
            await reply(OutboundText(text=messages.ENTER_AT_LEAST_ONE_ID))

        for tax_id in tax_ids:
            if not is_valid_tax_id(tax_id):
                await reply(OutboundText(text=messages.invalid_tax_id(tax_id)))
                continue

            try:
                result = await fetch(tax_id)
            except CompanyNotFoundError:
                logger.info(f"[{session_id}] Company {tax_id} not found")
                await reply(OutboundText(text=messages.company_not_found(tax_id)))
                continue

            outbound = render(tax_id, result)
            try:
                await reply(outbound)
            finally:
                if isinstance(outbound, OutboundDocument):
                    outbound.content.close()

    @staticmethod
    def _render_company(tax_id: str, info: CompanyInfo) -> OutboundMessage:
        return OutboundText(text=messages.render_company(tax_id, info))

    @staticmethod
    def _render_activities(tax_id: str, entries: List[ActivityEntry]) -> OutboundMessage:
        ordered = sorted(entries, key=lambda entry: entry.activity_type, reverse=True)
        return OutboundText(text=messages.render_activities(tax_id, ordered))

    @staticmethod
    def _render_document(tax_id: str, content) -> OutboundMessage:
        return OutboundDocument(filename=f"{tax_id}.pdf", content=content)
