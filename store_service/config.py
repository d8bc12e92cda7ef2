from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # Основные настройки приложения
    app_name: str = "Store Service"
    debug: bool = False
    log_level: str = "INFO"

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8080

    # Настройки базы данных (sqlite по умолчанию, postgresql+psycopg2 в проде)
    database_url: str = "sqlite:///./example.db"

    # CORS
    allowed_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Создаем экземпляр настроек
settings = Settings()
