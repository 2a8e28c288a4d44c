import logging
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from travel_admin.core.config import settings

logger = logging.getLogger(__name__)


class Database:
    """Хэндл хранилища: engine + фабрика сессий.

    Создаётся явно при старте приложения (lifespan) и закрывается при остановке.
    """

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            url = url or settings.DATABASE_URL
            is_sqlite = url.startswith("sqlite")
            engine = create_engine(
                url,
                pool_pre_ping=True,  # Проверка соединения перед использованием
                echo=settings.DEBUG,  # Логирование SQL запросов в debug режиме
                **({} if is_sqlite else {
                    "pool_size": settings.DATABASE_POOL_SIZE,
                    "max_overflow": settings.DATABASE_MAX_OVERFLOW,
                }),
            )
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def init_db(self):
        from travel_admin.models import Base

        logger.info("Инициализация базы данных...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("✅ База данных инициализирована")

    def check_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"❌ Ошибка подключения к БД: {e}")
            return False

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
