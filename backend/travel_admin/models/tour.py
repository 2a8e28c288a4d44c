"""
Модели туров: однодневные, многодневные и авторские.

У всех трёх одинаковый набор полей и программа по дням (title + description).
Многодневные туры дополнительно хранят ручной порядок вывода (`order`).
"""
from sqlalchemy import Column, String, Integer, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin


class TourFieldsMixin(TimestampMixin):
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Основная информация
    title = Column(String(255), nullable=False, index=True)
    transport = Column(String(255), nullable=True)
    duration = Column(String(100), nullable=True)       # "3 дня"
    time_to_start = Column(String(100), nullable=True)  # "08:00"
    type = Column(String(100), nullable=True)
    level = Column(String(100), nullable=True)

    # Группа и цена
    min_num_people = Column(Integer, nullable=True)
    max_num_people = Column(Integer, nullable=True)
    price = Column(Integer, nullable=True)

    add_info = Column(Text, nullable=True)
    img = Column(JSON, nullable=False, default=list)
    tour_dates = Column(JSON, nullable=False, default=list)
    booking_type = Column(String(100), nullable=True, default="default")
    places = Column(JSON, nullable=False, default=list)
    checklists = Column(JSON, nullable=False, default=list)


class DayInfoMixin:
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)


# ── 1. однодневные туры ──────────────────────────────────

class OneDayTour(TourFieldsMixin, Base):
    __tablename__ = 'one_day_tours'

    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="one_day_tours")
    info_by_days = relationship("OneDayTourDay", back_populates="tour", cascade="all, delete-orphan",
                                order_by="OneDayTourDay.id")

    def __repr__(self):
        return f"<OneDayTour(id={self.id}, title={self.title})>"


class OneDayTourDay(DayInfoMixin, Base):
    __tablename__ = 'one_day_tour_days'

    tour_id = Column(Integer, ForeignKey('one_day_tours.id', ondelete='CASCADE'), nullable=False, index=True)

    tour = relationship("OneDayTour", back_populates="info_by_days")


# ── 2. многодневные туры ─────────────────────────────────

class MultiDayTour(TourFieldsMixin, Base):
    __tablename__ = 'multi_day_tours'

    # Ручной порядок вывода; уникальность не гарантируется
    order = Column(Integer, nullable=False, default=0, index=True)

    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="multi_day_tours")
    info_by_days = relationship("MultiDayTourDay", back_populates="tour", cascade="all, delete-orphan",
                                order_by="MultiDayTourDay.id")

    def __repr__(self):
        return f"<MultiDayTour(id={self.id}, title={self.title}, order={self.order})>"


class MultiDayTourDay(DayInfoMixin, Base):
    __tablename__ = 'multi_day_tour_days'

    tour_id = Column(Integer, ForeignKey('multi_day_tours.id', ondelete='CASCADE'), nullable=False, index=True)

    tour = relationship("MultiDayTour", back_populates="info_by_days")


# ── 3. авторские туры ────────────────────────────────────

class AutorTour(TourFieldsMixin, Base):
    __tablename__ = 'autor_tours'

    region_id = Column(Integer, ForeignKey('regions.id', ondelete='SET NULL'), nullable=True, index=True)

    region = relationship("Region", back_populates="autor_tours")
    info_by_days = relationship("AutorTourDay", back_populates="tour", cascade="all, delete-orphan",
                                order_by="AutorTourDay.id")

    def __repr__(self):
        return f"<AutorTour(id={self.id}, title={self.title})>"


class AutorTourDay(DayInfoMixin, Base):
    __tablename__ = 'autor_tour_days'

    tour_id = Column(Integer, ForeignKey('autor_tours.id', ondelete='CASCADE'), nullable=False, index=True)

    tour = relationship("AutorTour", back_populates="info_by_days")
