from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


class Database:
    """Движок и фабрика сессий, создаются один раз на приложение"""

    def __init__(self, database_url: str, echo: bool = False):
        self.url = database_url

        if database_url.startswith("sqlite"):
            # Сессии живут в потоках threadpool'а FastAPI
            self.engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                echo=echo
            )
        else:
            self.engine = create_engine(
                database_url,
                pool_pre_ping=True,
                pool_size=10,
                max_overflow=20,
                echo=echo
            )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def create_tables(self):
        """Создает таблицы для всех моделей"""
        # Импорт моделей, чтобы они попали в Base.metadata
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        """Тест подключения к БД"""
        with self.SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return True

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency для получения сессии БД"""
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
