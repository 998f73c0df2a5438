"""
Контекст выполнения команды.

DirectDispatch - команда пришла от пользователя и сохраняется как последняя.
ReplayedDispatch - команда повторяется через /last и повторно не сохраняется.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class DirectDispatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["direct"] = "direct"


class ReplayedDispatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["replayed"] = "replayed"
    original_text: str


DispatchContext = Union[DirectDispatch, ReplayedDispatch]

DIRECT = DirectDispatch()
