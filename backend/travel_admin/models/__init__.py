"""
SQLAlchemy модели для работы с базой данных
"""
from .base import Base
from .user import User, UserRole
from .region import Region
from .hotel import Hotel, Comfort
from .event import Event
from .place import Place, InfoPlace
from .tour import (
    OneDayTour, OneDayTourDay,
    MultiDayTour, MultiDayTourDay,
    AutorTour, AutorTourDay,
)

__all__ = [
    # Base
    "Base",

    # User
    "User",
    "UserRole",

    # Region
    "Region",

    # Hotel, Event, Place
    "Hotel",
    "Comfort",
    "Event",
    "Place",
    "InfoPlace",

    # Tours
    "OneDayTour",
    "OneDayTourDay",
    "MultiDayTour",
    "MultiDayTourDay",
    "AutorTour",
    "AutorTourDay",
]
