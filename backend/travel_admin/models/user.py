"""
Модель пользователей админки (создаются вне API)
"""
from sqlalchemy import Column, String, Integer, Enum
import enum

from .base import Base, TimestampMixin


class UserRole(str, enum.Enum):
    """Роли пользователей"""
    ADMIN = "ADMIN"
    USER = "USER"


class User(TimestampMixin, Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # хэш, не пароль
    login = Column(String(100), unique=True, nullable=False, index=True)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.USER)

    def __repr__(self):
        return f"<User(id={self.id}, login={self.login}, role={self.role})>"
