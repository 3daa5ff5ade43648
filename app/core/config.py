"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Workout Program Tracker"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database: local SQLite file by default, PostgreSQL when configured
    database_backend: Literal["sqlite", "postgresql"] = "sqlite"
    sqlite_path: str = "workout_tracker.db"
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "workout_tracker"
    database_ssl_mode: str = "disable"

    # Pool (PostgreSQL only)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Startup
    create_tables_on_startup: bool = True
    seed_exercises: bool = True

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    @property
    def is_sqlite(self) -> bool:
        return self.database_backend == "sqlite"

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=disable") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        if self.is_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for the application (aiosqlite or asyncpg driver)."""
        if self.is_sqlite:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        ssl = "require" if self.database_ssl_mode == "require" else "disable"
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={ssl}")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
