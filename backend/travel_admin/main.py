"""
FastAPI Main Application
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from travel_admin.core.config import settings
from travel_admin.core.database import Database
from travel_admin.api.v1 import api_router

# Настройка логирования
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Собирает приложение; тесты передают свой `Database`."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 Запуск {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.APP_ENV}")

        db = database or Database(settings.DATABASE_URL)
        app.state.db = db

        # Проверяем подключение к БД
        if db.check_connection():
            logger.info("✅ База данных подключена")
        else:
            logger.warning("⚠️  База данных недоступна")

        # Создаём таблицы если нужно
        try:
            db.init_db()
        except Exception as e:
            logger.error(f"Ошибка инициализации БД: {e}")

        logger.info("✅ Приложение запущено")
        try:
            yield
        finally:
            logger.info("🛑 Остановка приложения")
            db.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API админки туристического портала: регионы, отели, события, места и туры",
        lifespan=lifespan,
    )
    if database is not None:
        # Доступно и без запуска lifespan (TestClient без with)
        app.state.db = database

    # CORS middleware; Content-Range нужен админке для пагинации
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Range"],
    )

    register_exception_handlers(app)

    # ============= Роутеры =============

    app.include_router(api_router, prefix="/api")

    # ============= Базовые endpoints =============

    @app.get("/")
    async def root():
        """Корневой endpoint"""
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health_check(request: Request):
        """Health check для мониторинга"""
        db_ok = request.app.state.db.check_connection()

        return {
            "status": "healthy" if db_ok else "degraded",
            "database": "connected" if db_ok else "disconnected",
            "version": settings.APP_VERSION
        }

    return app


def register_exception_handlers(app: FastAPI):
    """Все ошибки отдаются телом {"error": "..."}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in errors
        )
        return JSONResponse(status_code=400, content={"error": message or "Invalid request"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"❌ Необработанная ошибка {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "travel_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
