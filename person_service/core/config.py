# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, read once at import.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "person-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8080"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./person.db")
    POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))
    CREATE_SCHEMA: bool = os.getenv("DB_CREATE_SCHEMA", "true").lower() == "true"

    # "sql" or "memory"
    REPOSITORY_BACKEND: str = os.getenv("REPOSITORY_BACKEND", "sql").lower()

    HEALTH_FREE_MEMORY_THRESHOLD: int = int(
        os.getenv("HEALTH_FREE_MEMORY_THRESHOLD", "20000000")
    )

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
