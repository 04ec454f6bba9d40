import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    APP_NAME: str = "Facility Service API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    JWT_SECRET: str = os.getenv("JWT_SECRET", "change-me")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRE_MINUTES: int = int(os.getenv("JWT_EXPIRE_MINUTES", 1440))  # 24 hours default

    # Full SQLAlchemy URL; when unset the PostgreSQL parts below are used
    DATABASE_URL: str | None = os.getenv("DATABASE_URL")

    DB_USER: str | None = os.getenv("DB_USER")
    DB_PASS: str | None = os.getenv("DB_PASS")
    DB_HOST: str | None = os.getenv("DB_HOST", "localhost")
    DB_PORT: str | None = os.getenv("DB_PORT", "5432")
    FACILITY_DB_NAME: str | None = os.getenv("FACILITY_DB_NAME", "facility")
    DB_SSLMODE: str | None = os.getenv("DB_SSLMODE")

    DB_POOL_SIZE: int = 2
    DB_MAX_OVERFLOW: int = 2

    CORS_ORIGINS: List[str] = [
        "http://localhost:8080",
        "http://127.0.0.1:8002",
    ]

    DEFAULT_PER_PAGE: int = 15
    MAX_PER_PAGE: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def build_database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    url = (
        f"postgresql+psycopg2://{settings.DB_USER}:{settings.DB_PASS}@{settings.DB_HOST}:{settings.DB_PORT}/{settings.FACILITY_DB_NAME}"
    )
    if settings.DB_SSLMODE:
        url = f"{url}?sslmode={settings.DB_SSLMODE}"
    return url


FACILITY_DATABASE_URL = build_database_url()
