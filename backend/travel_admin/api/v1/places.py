from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, joinedload, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import InfoPlace, Place
from travel_admin.schemas import MessageResponse, PlaceOut, PlacePayload
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/places", tags=["places"])

places = ResourceService(
    Place,
    resource="places",
    label="Place",
    required=("title", "img", "region_id"),
    required_message="Title, img (array), and regionId are required",
    load_options=[joinedload(Place.region), selectinload(Place.info_places)],
    child_attr="info_places",
    child_model=InfoPlace,
)


@router.get("", response_model=List[PlaceOut])
def list_places(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, places.default_sort)
    rows, response.headers["Content-Range"] = places.list(db, params)
    return [PlaceOut.model_validate(row) for row in rows]


@router.get("/{place_id}", response_model=PlaceOut)
def get_place(place_id: int, db: Session = Depends(get_db)):
    return PlaceOut.model_validate(places.get(db, place_id))


@router.post("", response_model=PlaceOut, status_code=201)
def create_place(payload: PlacePayload, db: Session = Depends(get_db)):
    return PlaceOut.model_validate(places.create(db, payload))


@router.put("/{place_id}", response_model=PlaceOut)
def update_place(place_id: int, payload: PlacePayload, db: Session = Depends(get_db)):
    return PlaceOut.model_validate(places.update(db, place_id, payload))


@router.delete("/{place_id}", response_model=MessageResponse)
def delete_place(place_id: int, db: Session = Depends(get_db)):
    return places.delete(db, place_id)
