from sqlalchemy import Column, String, Integer, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class Place(TimestampMixin, Base):
    __tablename__ = 'places'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    add_info = Column(Text, nullable=True)
    links = Column(JSON, nullable=True, default=list)
    img = Column(JSON, nullable=False, default=list)

    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="places")
    info_places = relationship("InfoPlace", back_populates="place", cascade="all, delete-orphan",
                               order_by="InfoPlace.id")

    def __repr__(self):
        return f"<Place(id={self.id}, title={self.title})>"


class InfoPlace(Base):
    __tablename__ = 'info_places'

    id = Column(Integer, primary_key=True, autoincrement=True)
    place_id = Column(Integer, ForeignKey('places.id', ondelete='CASCADE'), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    place = relationship("Place", back_populates="info_places")

    def __repr__(self):
        return f"<InfoPlace {self.title}>"
