"""
Преобразование сырых обновлений Telegram в доменные Update.
"""

from typing import Any, Dict

from ...domain.entities import NonTextMessage, OtherUpdate, TextMessage, Update

# Поля сообщения Telegram, определяющие тип содержимого без текста
CONTENT_TYPES = (
    "photo",
    "sticker",
    "document",
    "audio",
    "voice",
    "video",
    "video_note",
    "animation",
    "contact",
    "location",
    "venue",
    "poll",
    "dice",
)


def parse_update(raw: Dict[str, Any]) -> Update:
    """
    Разобрать обновление Telegram.

    Обрабатываются только новые сообщения (поле message); всё остальное
    (edited_message, callback_query, my_chat_member...) становится
    OtherUpdate с именем поля в update_type.

    Args:
        raw: JSON-объект Update из Bot API

    Returns:
        TextMessage, NonTextMessage или OtherUpdate

    Пример:
        >>> parse_update({"update_id": 1, "message": {"chat": {"id": 42}, "text": "/help"}})
        TextMessage(kind='text_message', update_id=1, chat_ref=42, text='/help')
    """
    update_id = raw.get("update_id", 0)
    message = raw.get("message")
    chat = message.get("chat") if isinstance(message, dict) else None

    if not isinstance(chat, dict) or "id" not in chat:
        update_type = next((key for key in raw if key != "update_id"), "unknown")
        return OtherUpdate(update_id=update_id, update_type=update_type)

    text = message.get("text")
    if text is None:
        content_type = next((key for key in CONTENT_TYPES if key in message), "unknown")
        return NonTextMessage(update_id=update_id, chat_ref=chat["id"], content_type=content_type)

    return TextMessage(update_id=update_id, chat_ref=chat["id"], text=text)
