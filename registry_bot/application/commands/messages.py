"""
Тексты ответов бота (HTML-разметка Telegram).

Все значения, пришедшие от пользователя или из API реестра,
экранируются перед подстановкой.
"""

from html import escape
from typing import Iterable, Optional

from ...domain.entities import ActivityEntry, CompanyInfo

START = "Здравствуйте! Для получения информации о работе с ботом используйте команду /help."

HELP = (
    "<b><u>Bot menu</u></b>:\n"
    "/start – начать общение с ботом;\n"
    "/help – получить справку о доступных командах;\n"
    "/hello – получить информацию о создателе бота;\n"
    "/inn – получить наименования и адреса компаний по ИНН;\n"
    "/okved – получить информацию о видах деятельности компании, "
    "отсортированных в обратном алфавитном порядке;\n"
    "/egrul – получить выписку из ЕГРЮЛ по ИНН компании;\n"
    "/last – повторить последнее действие бота."
)

UNKNOWN_COMMAND = "Неизвестная команда, попробуйте ещё раз"
TEXT_ONLY = "Поддерживаются только текстовые сообщения"
NO_PRIOR_COMMAND = "Вы еще не ввели ни одной валидной команды!"
ENTER_AT_LEAST_ONE_ID = "Введите как минимум один ИНН"


def render_hello(name: str, email: Optional[str] = None, url: Optional[str] = None) -> str:
    lines = ["<b><u>Информация об авторе</u></b>:", f"Имя: {escape(name)}"]
    if email:
        lines.append(f"E-mail: {escape(email)}")
    if url:
        lines.append(f"Ссылка на github: {escape(url)}")
    return "\n".join(lines)


def invalid_tax_id(value: str) -> str:
    return f"Строка \"{escape(value)}\" не является валидным ИНН"


def company_not_found(tax_id: str) -> str:
    return f"Компания с ИНН \"{escape(tax_id)}\" не найдена"


def render_company(tax_id: str, info: CompanyInfo) -> str:
    return (
        f"<b>Информация о компании с ИНН \"{escape(tax_id)}\":</b>\n"
        f"Наименование компании: {escape(info.name)}\n"
        f"Юридический адрес: {escape(info.address)}"
    )


def render_activities(tax_id: str, entries: Iterable[ActivityEntry]) -> str:
    """Список выводится в переданном порядке; сортирует вызывающий."""
    lines = "\n".join(f"{escape(entry.code)} {escape(entry.activity_type)}" for entry in entries)
    return f"<b>Список видов деятельности компании с ИНН \"{escape(tax_id)}\":</b>\n{lines}"
