from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, joinedload, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import Comfort, Hotel
from travel_admin.schemas import HotelOut, HotelPayload, MessageResponse
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/hotels", tags=["hotels"])

hotels = ResourceService(
    Hotel,
    resource="hotels",
    label="Hotel",
    required=("title", "city", "region_id", "img"),
    required_message="Title, city, regionId, and img (array) are required",
    load_options=[joinedload(Hotel.region), selectinload(Hotel.comforts)],
    child_attr="comforts",
    child_model=Comfort,
)


@router.get("", response_model=List[HotelOut])
def list_hotels(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, hotels.default_sort)
    rows, response.headers["Content-Range"] = hotels.list(db, params)
    return [HotelOut.model_validate(row) for row in rows]


@router.get("/{hotel_id}", response_model=HotelOut)
def get_hotel(hotel_id: int, db: Session = Depends(get_db)):
    return HotelOut.model_validate(hotels.get(db, hotel_id))


@router.post("", response_model=HotelOut, status_code=201)
def create_hotel(payload: HotelPayload, db: Session = Depends(get_db)):
    # comforts создаются вместе с отелем
    return HotelOut.model_validate(hotels.create(db, payload))


@router.put("/{hotel_id}", response_model=HotelOut)
def update_hotel(hotel_id: int, payload: HotelPayload, db: Session = Depends(get_db)):
    return HotelOut.model_validate(hotels.update(db, hotel_id, payload))


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(hotel_id: int, db: Session = Depends(get_db)):
    return hotels.delete(db, hotel_id)
