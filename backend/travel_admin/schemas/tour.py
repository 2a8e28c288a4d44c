"""
Схемы для всех трёх видов туров (однодневные, многодневные, авторские).
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, Field

from .base import CamelModel, DayInfoIn, DayInfoOut, PayloadModel, RegionBrief


class TourPayload(PayloadModel):
    LIST_FIELDS = ("img", "tour_dates", "places", "checklists", "info_by_days")

    title: Optional[str] = None
    transport: Optional[str] = None
    duration: Optional[str] = None
    time_to_start: Optional[str] = None
    type: Optional[str] = None
    level: Optional[str] = None
    min_num_people: Optional[int] = None
    max_num_people: Optional[int] = None
    price: Optional[int] = None
    add_info: Optional[str] = None
    img: Optional[List[Any]] = None
    tour_dates: Optional[List[Any]] = None
    booking_type: Optional[str] = None
    places: Optional[List[Any]] = None
    checklists: Optional[List[Any]] = None
    region_id: Optional[int] = None
    # Авторские туры исторически присылают программу как InfoByDaysAutor
    info_by_days: Optional[List[DayInfoIn]] = Field(
        default=None,
        validation_alias=AliasChoices("infoByDays", "info_by_days", "InfoByDaysAutor"),
    )


class MultiDayTourPayload(TourPayload):
    order: Optional[int] = None


class TourBrief(CamelModel):
    id: int
    title: str
    transport: Optional[str] = None
    duration: Optional[str] = None
    time_to_start: Optional[str] = None
    type: Optional[str] = None
    level: Optional[str] = None
    min_num_people: Optional[int] = None
    max_num_people: Optional[int] = None
    price: Optional[int] = None
    add_info: Optional[str] = None
    img: List[Any] = []
    tour_dates: List[Any] = []
    booking_type: Optional[str] = None
    places: List[Any] = []
    checklists: List[Any] = []
    region_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class TourOut(TourBrief):
    region: Optional[RegionBrief] = None
    info_by_days: List[DayInfoOut] = []


class MultiDayTourBrief(TourBrief):
    order: int


class MultiDayTourOut(TourOut):
    order: int
