"""
Разбор текста сообщения на команду и аргументы.
"""

import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict

_WHITESPACE = re.compile(r"\s+")


class ParsedCommand(BaseModel):
    """
    Результат разбора сообщения.

    Атрибуты:
        token: Первое слово сообщения (команда)
        args: Остальные слова (аргументы), возможно пустые
    """

    model_config = ConfigDict(frozen=True)

    token: str
    args: Tuple[str, ...] = ()


def parse_command(text: str) -> ParsedCommand:
    """
    Разобрать сообщение.

    Все последовательности пробельных символов сжимаются в один пробел,
    затем строка делится по пробелу. Форма аргументов не проверяется.
    Пустая строка дает одну пустую команду.

    Пример:
        >>> parse_command("/inn  7707083893\\n7736050003")
        ParsedCommand(token='/inn', args=('7707083893', '7736050003'))
    """
    tokens = _WHITESPACE.sub(" ", text).split(" ")
    return ParsedCommand(token=tokens[0], args=tuple(tokens[1:]))
