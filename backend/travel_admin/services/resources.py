"""
Общий CRUD для ресурсов админки.

Каждый ресурс описывается экземпляром `ResourceService`: модель, имя для
Content-Range, подписи для сообщений, обязательные поля и связи, которые
подгружаются вместе с записью.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from fastapi import HTTPException
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_admin.models import Region
from travel_admin.schemas.base import PayloadModel
from travel_admin.services.list_query import ListParams, field_map, fetch_page

logger = logging.getLogger(__name__)


class ResourceService:
    # Поля (camelCase), которые сортируются перед запрошенной сортировкой
    leading_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        model,
        *,
        resource: str,
        label: str,
        required: Sequence[str],
        required_message: str,
        load_options: Sequence = (),
        child_attr: Optional[str] = None,
        child_model=None,
        default_sort: Tuple[str, str] = ("createdAt", "desc"),
    ):
        self.model = model
        self.resource = resource
        self.label = label
        self.required = tuple(required)
        self.required_message = required_message
        self.load_options = list(load_options)
        self.child_attr = child_attr
        self.child_model = child_model
        self.default_sort = default_sort
        self.fields = field_map(model)
        self.not_null = {column.key for column in inspect(model).columns if not column.nullable}

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found!"

    # ── чтение ──────────────────────────────────────────

    def list(self, db: Session, params: ListParams) -> Tuple[list, str]:
        return fetch_page(
            db,
            self.model,
            params,
            resource=self.resource,
            fields=self.fields,
            options=self.load_options,
            leading_fields=self.leading_fields,
        )

    def find(self, db: Session, item_id: int):
        return (
            db.query(self.model)
            .options(*self.load_options)
            .filter(self.model.id == item_id)
            .first()
        )

    def get(self, db: Session, item_id: int):
        item = self.find(db, item_id)
        if item is None:
            raise HTTPException(status_code=404, detail=self.not_found_message)
        return item

    # ── запись ──────────────────────────────────────────

    def validate_create(self, payload: PayloadModel):
        for name in self.required:
            if not getattr(payload, name):
                raise HTTPException(status_code=400, detail=self.required_message)

    def create(self, db: Session, payload: PayloadModel):
        self.validate_create(payload)

        data = payload.model_dump(exclude_none=True)
        children = data.pop(self.child_attr, None) if self.child_attr else None
        region_id = data.pop("region_id", None)
        if region_id is not None:
            data["region_id"] = self._existing_region_id(db, region_id)

        item = self.model(**data)
        self.before_create(db, item, payload)
        if children:
            setattr(item, self.child_attr, [self.child_model(**child) for child in children])

        db.add(item)
        db.commit()
        logger.info(f"✅ {self.label} #{item.id} создан")
        return self.get(db, item.id)

    def before_create(self, db: Session, item, payload: PayloadModel):
        """Хук для полей, которые вычисляются на сервере."""

    def update(self, db: Session, item_id: int, payload: PayloadModel):
        item = db.query(self.model).filter(self.model.id == item_id).first()
        if item is None:
            raise HTTPException(status_code=404, detail=self.not_found_message)

        for name, value in self.patch_values(payload).items():
            if name == "region_id":
                value = self._existing_region_id(db, value)
            setattr(item, name, value)

        try:
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"❌ Ошибка обновления {self.resource} #{item_id}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Error updating {self.label.lower()}")

        return self.get(db, item_id)

    def patch_values(self, payload: PayloadModel) -> Dict[str, Any]:
        """Поля, которые реально меняются при PUT.

        - не прислано -> остаётся как было;
        - пустое обязательное поле, null в regionId или в NOT NULL колонке -> остаётся как было;
        - null у остальных необязательных полей -> очищается.
        Дочерние записи через PUT не меняются.
        """
        data = payload.model_dump(exclude_unset=True)
        if self.child_attr:
            data.pop(self.child_attr, None)

        required = set(self.required)
        patch = {}
        for name, value in data.items():
            if name in required and not value:
                continue
            if value is None and (name == "region_id" or name in self.not_null):
                continue
            patch[name] = value
        return patch

    def delete(self, db: Session, item_id: int) -> Dict[str, str]:
        item = db.query(self.model).filter(self.model.id == item_id).first()
        if item is None:
            raise HTTPException(status_code=404, detail=self.not_found_message)

        try:
            db.delete(item)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"❌ Ошибка удаления {self.resource} #{item_id}: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Error deleting {self.label.lower()}")

        logger.info(f"🗑 {self.label} #{item_id} удалён")
        return {"message": f"{self.label} deleted successfully!"}

    @staticmethod
    def _existing_region_id(db: Session, region_id: int) -> int:
        if db.get(Region, region_id) is None:
            raise HTTPException(status_code=400, detail=f"Region with id {region_id} does not exist")
        return region_id
