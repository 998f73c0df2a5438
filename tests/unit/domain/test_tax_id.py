"""
Unit тесты для проверки ИНН.
"""

import pytest

from registry_bot.domain.value_objects import is_valid_tax_id


@pytest.mark.parametrize("value", ["7707083893", "0000000000"])
def test_valid_tax_id(value):
    assert is_valid_tax_id(value)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "770708389",
        "77070838931",
        "770708389a",
        " 7707083893",
        "7707083893\n",
        "７７０７０８３８９３",
        "٧٧٠٧٠٨٣٨٩٣",
    ],
)
def test_invalid_tax_id(value):
    assert not is_valid_tax_id(value)
