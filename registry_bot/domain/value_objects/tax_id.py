"""
Value Object для ИНН юридического лица.
"""

import re

# Ровно 10 ASCII-цифр; \d не подходит, т.к. допускает цифры других алфавитов
TAX_ID_PATTERN = re.compile(r"[0-9]{10}")


def is_valid_tax_id(value: str) -> bool:
    """
    Проверить, что строка является ИНН юридического лица.

    Args:
        value: Проверяемая строка

    Returns:
        True если строка состоит ровно из 10 цифр

    Пример:
        >>> is_valid_tax_id("7707083893")
        True
        >>> is_valid_tax_id("12345")
        False
    """
    return TAX_ID_PATTERN.fullmatch(value) is not None
