"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Record store ─────────────────────────────────────────────────────────
    # Default is an in-memory SQLite database that lives as long as the process.
    # Point at a file for a store that survives restarts:
    #   sqlite:///./promptvault.db
    DATABASE_URL: str = "sqlite://"

    # ── Caller identity ──────────────────────────────────────────────────────
    SECRET_KEY: str = "promptvault-dev-secret-change-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    # ── CORS ─────────────────────────────────────────────────────────────────
    # Comma-separated list of allowed origins.
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ── Logging ──────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    # ── Marketplace limits ───────────────────────────────────────────────────
    MAX_TITLE_LENGTH: int = 100
    MAX_DESCRIPTION_LENGTH: int = 500
    MAX_CONTENT_LENGTH: int = 10000
    MAX_TAGS: int = 10
    MAX_TAG_LENGTH: int = 30
    MAX_USERNAME_LENGTH: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
