from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, joinedload, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import OneDayTour, OneDayTourDay
from travel_admin.schemas import MessageResponse, TourOut, TourPayload
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/onedaytours", tags=["one-day-tours"])

one_day_tours = ResourceService(
    OneDayTour,
    resource="oneDayTours",
    label="One-day tour",
    required=("title", "img", "region_id"),
    required_message="Title, img (array), and regionId are required",
    load_options=[joinedload(OneDayTour.region), selectinload(OneDayTour.info_by_days)],
    child_attr="info_by_days",
    child_model=OneDayTourDay,
)


@router.get("", response_model=List[TourOut])
def list_one_day_tours(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, one_day_tours.default_sort)
    rows, response.headers["Content-Range"] = one_day_tours.list(db, params)
    return [TourOut.model_validate(row) for row in rows]


@router.get("/{tour_id}", response_model=TourOut)
def get_one_day_tour(tour_id: int, db: Session = Depends(get_db)):
    return TourOut.model_validate(one_day_tours.get(db, tour_id))


@router.post("", response_model=TourOut, status_code=201)
def create_one_day_tour(payload: TourPayload, db: Session = Depends(get_db)):
    return TourOut.model_validate(one_day_tours.create(db, payload))


@router.put("/{tour_id}", response_model=TourOut)
def update_one_day_tour(tour_id: int, payload: TourPayload, db: Session = Depends(get_db)):
    return TourOut.model_validate(one_day_tours.update(db, tour_id, payload))


@router.delete("/{tour_id}", response_model=MessageResponse)
def delete_one_day_tour(tour_id: int, db: Session = Depends(get_db)):
    return one_day_tours.delete(db, tour_id)
