from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from .base import CamelModel, DayInfoIn, DayInfoOut, PayloadModel, RegionBrief


class HotelPayload(PayloadModel):
    LIST_FIELDS = ("img", "links", "comforts")

    title: Optional[str] = None
    city: Optional[str] = None
    hotel_type: Optional[str] = None
    address: Optional[str] = None
    num_stars: Optional[int] = None
    description: Optional[str] = None
    add_info: Optional[str] = None
    img: Optional[List[Any]] = None
    links: Optional[List[Any]] = None
    region_id: Optional[int] = None
    comforts: Optional[List[DayInfoIn]] = None


class HotelBrief(CamelModel):
    id: int
    title: str
    city: str
    hotel_type: Optional[str] = None
    address: Optional[str] = None
    num_stars: Optional[int] = None
    description: Optional[str] = None
    add_info: Optional[str] = None
    img: List[Any] = []
    links: Optional[List[Any]] = None
    region_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class HotelOut(HotelBrief):
    region: Optional[RegionBrief] = None
    comforts: List[DayInfoOut] = []
