"""
Unit тесты для текстов ответов.
"""

from registry_bot.application.commands import messages
from registry_bot.domain.entities import ActivityEntry, CompanyInfo


def test_render_company_escapes_registry_values():
    text = messages.render_company(
        "7707083893",
        CompanyInfo(name="ООО \"Рога & Копыта\"", address="<script>"),
    )

    assert "Рога &amp; Копыта" in text
    assert "&lt;script&gt;" in text
    assert "<script>" not in text


def test_render_activities_keeps_given_order():
    text = messages.render_activities(
        "7707083893",
        [
            ActivityEntry(code="2", activity_type="Б"),
            ActivityEntry(code="1", activity_type="А"),
        ],
    )

    assert text.split("\n")[1:] == ["2 Б", "1 А"]


def test_render_hello_optional_fields():
    assert messages.render_hello("Ivan") == "<b><u>Информация об авторе</u></b>:\nИмя: Ivan"

    text = messages.render_hello("Ivan", email="ivan@example.com", url="https://github.com/ivan")

    assert "E-mail: ivan@example.com" in text
    assert "Ссылка на github: https://github.com/ivan" in text


def test_not_found_message():
    assert messages.company_not_found("7707083893") == "Компания с ИНН \"7707083893\" не найдена"
