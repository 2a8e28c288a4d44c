from __future__ import annotations

from typing import Any, List, Optional

from .base import PayloadModel, RegionBrief
from .event import EventBrief
from .hotel import HotelBrief
from .place import PlaceBrief
from .tour import MultiDayTourBrief, TourBrief


class RegionPayload(PayloadModel):
    LIST_FIELDS = ("img",)

    title: Optional[str] = None
    description: Optional[str] = None
    img: Optional[List[Any]] = None
    link: Optional[str] = None


class RegionOut(RegionBrief):
    multi_day_tours: List[MultiDayTourBrief] = []
    one_day_tours: List[TourBrief] = []
    autor_tours: List[TourBrief] = []
    hotels: List[HotelBrief] = []
    events: List[EventBrief] = []
    places: List[PlaceBrief] = []
