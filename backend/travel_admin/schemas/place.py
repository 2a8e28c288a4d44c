from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from .base import CamelModel, DayInfoIn, DayInfoOut, PayloadModel, RegionBrief


class PlacePayload(PayloadModel):
    LIST_FIELDS = ("img", "links", "info_places")

    title: Optional[str] = None
    description: Optional[str] = None
    add_info: Optional[str] = None
    links: Optional[List[Any]] = None
    img: Optional[List[Any]] = None
    region_id: Optional[int] = None
    info_places: Optional[List[DayInfoIn]] = None


class PlaceBrief(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    add_info: Optional[str] = None
    links: Optional[List[Any]] = None
    img: List[Any] = []
    region_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class PlaceOut(PlaceBrief):
    region: Optional[RegionBrief] = None
    info_places: List[DayInfoOut] = []
