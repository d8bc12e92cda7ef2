import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .database import Database
from .api import api_router

# Настройка логирования
logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    db: Database = app.state.db

    # Startup
    logger.info(f"🚀 Starting {app.title}...")

    try:
        # Создаем таблицы в БД
        db.create_tables()
        logger.info("✅ Database tables created")
    except Exception as e:
        logger.error(f"❌ Failed to start {app.title}: {e}")
        raise

    yield  # Приложение работает

    # Shutdown
    logger.info(f"🛑 Shutting down {app.title}...")
    db.dispose()
    logger.info("✅ Database connection closed")


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Собирает приложение с собственным подключением к БД"""
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.app_name,
        description="Товары, категории, корзины и платежи",
        version=VERSION,
        debug=app_settings.debug,
        lifespan=lifespan
    )
    app.state.settings = app_settings
    app.state.db = Database(app_settings.database_url, echo=app_settings.debug)

    # Middleware для CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    # Подключаем роуты
    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    def health_check():
        """Проверка здоровья сервиса"""
        try:
            app.state.db.ping()
        except Exception as e:
            logger.error(f"Database check failed: {e}")
            raise HTTPException(status_code=503, detail="Service unhealthy")

        return {
            "status": "healthy",
            "service": app_settings.app_name,
            "database": "connected",
            "version": VERSION
        }

    @app.get("/", tags=["health"])
    def root():
        """Корневой endpoint"""
        return {
            "service": app_settings.app_name,
            "version": VERSION,
            "status": "running",
            "docs": "/docs",
            "health": "/health"
        }

    # Exception handlers: тело ошибки всегда объект с одним ключом
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        key = "message" if exc.status_code == 404 else "error"
        return JSONResponse(
            status_code=exc.status_code,
            content={key: str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Глобальный обработчик исключений"""
        logger.error(f"❌ Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "store_service.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )
