from .base import DayInfoIn, DayInfoOut, MessageResponse, RegionBrief
from .region import RegionPayload, RegionOut
from .hotel import HotelPayload, HotelOut
from .event import EventPayload, EventOut
from .place import PlacePayload, PlaceOut
from .tour import TourPayload, TourOut, MultiDayTourPayload, MultiDayTourOut

__all__ = [
    "DayInfoIn",
    "DayInfoOut",
    "MessageResponse",
    "RegionBrief",
    "RegionPayload",
    "RegionOut",
    "HotelPayload",
    "HotelOut",
    "EventPayload",
    "EventOut",
    "PlacePayload",
    "PlaceOut",
    "TourPayload",
    "TourOut",
    "MultiDayTourPayload",
    "MultiDayTourOut",
]
