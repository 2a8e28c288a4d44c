from sqlalchemy import Column, String, Integer, Text, JSON
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class Region(TimestampMixin, Base):
    __tablename__ = 'regions'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    img = Column(JSON, nullable=False, default=list)
    link = Column(String(500), nullable=True)

    # relationships
    multi_day_tours = relationship("MultiDayTour", back_populates="region")
    one_day_tours = relationship("OneDayTour", back_populates="region")
    autor_tours = relationship("AutorTour", back_populates="region")
    hotels = relationship("Hotel", back_populates="region")
    events = relationship("Event", back_populates="region")
    places = relationship("Place", back_populates="region")

    def __repr__(self):
        return f"<Region(id={self.id}, title={self.title})>"
