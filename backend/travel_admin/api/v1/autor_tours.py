from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, joinedload, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import AutorTour, AutorTourDay
from travel_admin.schemas import MessageResponse, TourOut, TourPayload
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/autortours", tags=["autor-tours"])

autor_tours = ResourceService(
    AutorTour,
    resource="autorTours",
    label="Author tour",
    required=("title", "img", "region_id"),
    required_message="Title, img (array), and regionId are required",
    load_options=[joinedload(AutorTour.region), selectinload(AutorTour.info_by_days)],
    child_attr="info_by_days",
    child_model=AutorTourDay,
)


@router.get("", response_model=List[TourOut])
def list_autor_tours(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, autor_tours.default_sort)
    rows, response.headers["Content-Range"] = autor_tours.list(db, params)
    return [TourOut.model_validate(row) for row in rows]


@router.get("/{tour_id}", response_model=TourOut)
def get_autor_tour(tour_id: int, db: Session = Depends(get_db)):
    return TourOut.model_validate(autor_tours.get(db, tour_id))


@router.post("", response_model=TourOut, status_code=201)
def create_autor_tour(payload: TourPayload, db: Session = Depends(get_db)):
    # Программа по дням: infoByDays (или старый ключ InfoByDaysAutor)
    return TourOut.model_validate(autor_tours.create(db, payload))


@router.put("/{tour_id}", response_model=TourOut)
def update_autor_tour(tour_id: int, payload: TourPayload, db: Session = Depends(get_db)):
    return TourOut.model_validate(autor_tours.update(db, tour_id, payload))


@router.delete("/{tour_id}", response_model=MessageResponse)
def delete_autor_tour(tour_id: int, db: Session = Depends(get_db)):
    return autor_tours.delete(db, tour_id)
