from sqlalchemy import Column, String, Integer, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class Hotel(TimestampMixin, Base):
    __tablename__ = 'hotels'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    city = Column(String(100), nullable=False, index=True)
    hotel_type = Column(String(100), nullable=True)
    address = Column(Text, nullable=True)
    num_stars = Column(Integer, nullable=True)  # 1-5 звезд
    description = Column(Text, nullable=True)
    add_info = Column(Text, nullable=True)
    img = Column(JSON, nullable=False, default=list)
    links = Column(JSON, nullable=True, default=list)

    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="hotels")
    comforts = relationship("Comfort", back_populates="hotel", cascade="all, delete-orphan",
                            order_by="Comfort.id")

    def __repr__(self):
        return f"<Hotel(id={self.id}, title={self.title}, city={self.city})>"


class Comfort(Base):
    __tablename__ = 'hotel_comforts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(Integer, ForeignKey('hotels.id', ondelete='CASCADE'), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)

    hotel = relationship("Hotel", back_populates="comforts")

    def __repr__(self):
        return f"<Comfort {self.title}>"
