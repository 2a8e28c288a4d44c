from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from .base import CamelModel, PayloadModel, RegionBrief


class EventPayload(PayloadModel):
    LIST_FIELDS = ("img",)

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    img: Optional[List[Any]] = None
    region_id: Optional[int] = None


class EventBrief(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    link: Optional[str] = None
    img: List[Any] = []
    region_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class EventOut(EventBrief):
    region: Optional[RegionBrief] = None
