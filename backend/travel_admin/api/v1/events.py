from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session, joinedload

from travel_admin.api.v1.common import ListQueryArgs, list_query_args
from travel_admin.core.database import get_db
from travel_admin.models import Event
from travel_admin.schemas import EventOut, EventPayload, MessageResponse
from travel_admin.services.list_query import parse_list_params
from travel_admin.services.resources import ResourceService


router = APIRouter(prefix="/events", tags=["events"])

# regionId у события необязателен
events = ResourceService(
    Event,
    resource="events",
    label="Event",
    required=("title", "description", "img"),
    required_message="Title, description, and img (array) are required",
    load_options=[joinedload(Event.region)],
)


@router.get("", response_model=List[EventOut])
def list_events(
    response: Response,
    args: ListQueryArgs = Depends(list_query_args),
    db: Session = Depends(get_db),
):
    params = parse_list_params(args.range, args.sort, args.filter, events.default_sort)
    rows, response.headers["Content-Range"] = events.list(db, params)
    return [EventOut.model_validate(row) for row in rows]


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    return EventOut.model_validate(events.get(db, event_id))


@router.post("", response_model=EventOut, status_code=201)
def create_event(payload: EventPayload, db: Session = Depends(get_db)):
    return EventOut.model_validate(events.create(db, payload))


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: int, payload: EventPayload, db: Session = Depends(get_db)):
    return EventOut.model_validate(events.update(db, event_id, payload))


@router.delete("/{event_id}", response_model=MessageResponse)
def delete_event(event_id: int, db: Session = Depends(get_db)):
    return events.delete(db, event_id)
