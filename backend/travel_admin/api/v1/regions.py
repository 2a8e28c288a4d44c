from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, selectinload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import Region
from travel_admin.schemas import MessageResponse, RegionOut, RegionPayload
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/regions", tags=["regions"])

regions = ResourceService(
    Region,
    resource="regions",
    label="Region",
    required=("title", "description", "img"),
    required_message="Title, description, and img (array) are required",
    load_options=[
        selectinload(Region.multi_day_tours),
        selectinload(Region.one_day_tours),
        selectinload(Region.autor_tours),
        selectinload(Region.hotels),
        selectinload(Region.events),
        selectinload(Region.places),
    ],
)


@router.get("", response_model=List[RegionOut])
def list_regions(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, regions.default_sort)
    rows, response.headers["Content-Range"] = regions.list(db, params)
    return [RegionOut.model_validate(row) for row in rows]


@router.get("/{region_id}", response_model=RegionOut)
def get_region(region_id: int, db: Session = Depends(get_db)):
    return RegionOut.model_validate(regions.get(db, region_id))


@router.post("", response_model=RegionOut, status_code=201)
def create_region(payload: RegionPayload, db: Session = Depends(get_db)):
    return RegionOut.model_validate(regions.create(db, payload))


@router.put("/{region_id}", response_model=RegionOut)
def update_region(region_id: int, payload: RegionPayload, db: Session = Depends(get_db)):
    return RegionOut.model_validate(regions.update(db, region_id, payload))


@router.delete("/{region_id}", response_model=MessageResponse)
def delete_region(region_id: int, db: Session = Depends(get_db)):
    return regions.delete(db, region_id)
