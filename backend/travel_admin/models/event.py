from sqlalchemy import Column, String, Integer, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class Event(TimestampMixin, Base):
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    link = Column(String(500), nullable=True)
    img = Column(JSON, nullable=False, default=list)

    # Регион у события необязателен
    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="events")

    def __repr__(self):
        return f"<Event(id={self.id}, title={self.title})>"
