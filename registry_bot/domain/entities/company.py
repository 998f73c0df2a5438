"""
Данные о компании, возвращаемые провайдером реестра.
"""

from pydantic import BaseModel, ConfigDict, Field


class CompanyInfo(BaseModel):
    """
    Наименование и юридический адрес компании.

    Атрибуты:
        name: Полное наименование компании
        address: Юридический адрес
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Полное наименование компании")
    address: str = Field(description="Юридический адрес")


class ActivityEntry(BaseModel):
    """Вид деятельности компании по ОКВЭД."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Код по ОКВЭД")
    activity_type: str = Field(description="Наименование вида деятельности")
