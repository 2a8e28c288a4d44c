from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from travel_admin.core.config import settings


class CamelModel(BaseModel):
    """snake_case в Python, camelCase в JSON (regionId, createdAt, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def normalize_image(image: Any) -> Any:
    # Админка присылает новые файлы как {"rawFile": {"path": "x.jpg"}}
    if isinstance(image, dict):
        raw_file = image.get("rawFile")
        if isinstance(raw_file, dict) and raw_file.get("path"):
            return f"{settings.UPLOADS_URL_PREFIX}/{raw_file['path']}"
    return image


class PayloadModel(CamelModel):
    """Тело POST/PUT.

    Все поля необязательны: обязательность проверяет сервис ресурса, а
    `model_fields_set` отличает "поле не прислали" от "прислали null".
    Поля-списки, пришедшие не списком, отбрасываются, как будто их не было.
    """

    LIST_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _drop_malformed_lists(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        cleaned = dict(data)
        for name in cls.LIST_FIELDS:
            for key in _input_keys(cls, name):
                if key in cleaned and not isinstance(cleaned[key], list):
                    cleaned.pop(key)
        return cleaned

    @field_validator("img", mode="after", check_fields=False)
    @classmethod
    def _normalize_images(cls, value: Optional[List[Any]]) -> Optional[List[Any]]:
        if value is None:
            return value
        return [normalize_image(image) for image in value]


def _input_keys(model: type[BaseModel], name: str) -> set:
    info = model.model_fields[name]
    keys = {name}
    if info.alias:
        keys.add(info.alias)
    if isinstance(info.validation_alias, str):
        keys.add(info.validation_alias)
    elif isinstance(info.validation_alias, AliasChoices):
        keys.update(choice for choice in info.validation_alias.choices if isinstance(choice, str))
    return keys


class DayInfoIn(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None


class DayInfoOut(CamelModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None


class RegionBrief(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    img: List[Any] = []
    link: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
