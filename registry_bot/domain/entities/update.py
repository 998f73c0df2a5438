"""
Входящие обновления мессенджера.

Update - размеченное объединение (tagged union) по полю kind:
- TextMessage: сообщение с текстом
- NonTextMessage: сообщение без текста (фото, стикер, документ...)
- OtherUpdate: любое другое обновление (edited_message, callback_query...)
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Идентификатор чата: Telegram использует int, другие транспорты - строки
ChatRef = Union[int, str]


class TextMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text_message"] = "text_message"
    update_id: int
    chat_ref: ChatRef
    text: str


class NonTextMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["non_text_message"] = "non_text_message"
    update_id: int
    chat_ref: ChatRef
    content_type: str = "unknown"


class OtherUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    update_id: int
    update_type: str


Update = Annotated[
    Union[TextMessage, NonTextMessage, OtherUpdate],
    Field(discriminator="kind")
]
