from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session, joinedload, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import MultiDayTour, MultiDayTourDay
from travel_admin.schemas import MessageResponse, MultiDayTourOut, MultiDayTourPayload
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.ordering import MultiDayTourService, reorder_multi_day_tours


router = APIRouter(prefix="/multidaytours", tags=["multi-day-tours"])

multi_day_tours = MultiDayTourService(
    MultiDayTour,
    resource="multiDayTours",
    label="Multi-day tour",
    required=("title", "img", "region_id"),
    required_message="Title, img (array), and regionId are required",
    load_options=[joinedload(MultiDayTour.region), selectinload(MultiDayTour.info_by_days)],
    child_attr="info_by_days",
    child_model=MultiDayTourDay,
    default_sort=("order", "asc"),
)


@router.get("", response_model=List[MultiDayTourOut])
def list_multi_day_tours(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, multi_day_tours.default_sort)
    rows, response.headers["Content-Range"] = multi_day_tours.list(db, params)
    return [MultiDayTourOut.model_validate(row) for row in rows]


# Должен быть объявлен раньше PUT /{tour_id}
@router.put("/order", response_model=MessageResponse)
def update_multi_day_tours_order(payload: Any = Body(...), db: Session = Depends(get_db)):
    return reorder_multi_day_tours(db, payload)


@router.get("/{tour_id}", response_model=MultiDayTourOut)
def get_multi_day_tour(tour_id: int, db: Session = Depends(get_db)):
    return MultiDayTourOut.model_validate(multi_day_tours.get(db, tour_id))


@router.post("", response_model=MultiDayTourOut, status_code=201)
def create_multi_day_tour(payload: MultiDayTourPayload, db: Session = Depends(get_db)):
    return MultiDayTourOut.model_validate(multi_day_tours.create(db, payload))


@router.put("/{tour_id}", response_model=MultiDayTourOut)
def update_multi_day_tour(tour_id: int, payload: MultiDayTourPayload, db: Session = Depends(get_db)):
    return MultiDayTourOut.model_validate(multi_day_tours.update(db, tour_id, payload))


@router.delete("/{tour_id}", response_model=MessageResponse)
def delete_multi_day_tour(tour_id: int, db: Session = Depends(get_db)):
    return multi_day_tours.delete(db, tour_id)
