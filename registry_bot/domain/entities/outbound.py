"""
Исходящие сообщения, которые диспетчер отправляет в чат.
"""

import io
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class OutboundText(BaseModel):
    """
    Текстовый ответ пользователю.

    Атрибуты:
        text: Текст сообщения (HTML-разметка Telegram)
        parse_mode: Режим разметки
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str
    parse_mode: str = "HTML"


class OutboundDocument(BaseModel):
    """
    Файл-вложение.

    content читается ровно один раз при отправке, после чего закрывается.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["document"] = "document"
    filename: str
    content: io.IOBase


OutboundMessage = Union[OutboundText, OutboundDocument]
