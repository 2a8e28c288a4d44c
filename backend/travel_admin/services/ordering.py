"""
Ручной порядок многодневных туров (поле `order`).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_admin.models import MultiDayTour
from travel_admin.services.resources import ResourceService

logger = logging.getLogger(__name__)


class TourOrderError(Exception):
    pass


class MultiDayTourService(ResourceService):
    """Многодневные туры всегда выводятся по `order`, затем по запрошенному полю."""

    leading_fields = ("order",)

    def before_create(self, db: Session, item, payload):
        if payload.order is None:
            item.order = next_order(db)


def next_order(db: Session) -> int:
    # Новый тур встаёт в конец списка
    max_order = db.query(func.max(MultiDayTour.order)).scalar()
    return (max_order or 0) + 1


def parse_ordered_ids(payload: Any) -> List[int]:
    """[{id}, ...] или {"orderedTours": [{id}, ...]} -> список id по порядку."""
    if isinstance(payload, dict):
        payload = payload.get("orderedTours")
    if not isinstance(payload, list):
        raise HTTPException(status_code=400, detail="Invalid data format")

    ids = []
    for entry in payload:
        raw_id = entry.get("id") if isinstance(entry, dict) else None
        try:
            ids.append(int(raw_id))
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail="Invalid data format")
    return ids


def reorder_multi_day_tours(db: Session, payload: Any) -> Dict[str, str]:
    """Проставляет order = индекс в массиве одной транзакцией.

    Если хотя бы один тур не найден или запись упала, откатываются все изменения.
    """
    ids = parse_ordered_ids(payload)

    try:
        tours = {
            tour.id: tour
            for tour in db.query(MultiDayTour).filter(MultiDayTour.id.in_(ids)).all()
        }
        for index, tour_id in enumerate(ids):
            tour = tours.get(tour_id)
            if tour is None:
                raise TourOrderError(f"Multi-day tour {tour_id} not found")
            tour.order = index
        db.commit()
    except (TourOrderError, SQLAlchemyError) as e:
        db.rollback()
        logger.error(f"❌ Ошибка обновления порядка туров: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error updating tour order")

    logger.info(f"✅ Порядок {len(ids)} многодневных туров обновлён")
    return {"message": "Multi-day tours order updated successfully!"}
