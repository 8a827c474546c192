"""
Configuration settings for the Qatar Digital Solutions API
Reads environment variables and an optional .env file
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Qatar Digital Solutions API"
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (PostgreSQL in production, SQLite for local work)
    DATABASE_URL: str = "sqlite:///./qds.db"

    # Admin area
    ADMIN_PASSWORD: Optional[str] = None
    SESSION_SECRET: Optional[str] = None
    SESSION_COOKIE_NAME: str = "qds_session"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60

    # Frontend origins allowed to send the session cookie
    CORS_ORIGINS: List[str] = ["http://localhost:5000", "http://localhost:5173"]

    # Insert default blog posts, careers and services into empty tables
    SEED_ON_STARTUP: bool = True

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

    def validate_security(self) -> None:
        """Refuse to start a production deployment without its secrets"""
        if not self.is_production:
            return
        missing = [
            name for name in ("ADMIN_PASSWORD", "SESSION_SECRET")
            if not getattr(self, name)
        ]
        if missing:
            raise RuntimeError(
                f"{', '.join(missing)} must be set when APP_ENV=production"
            )


settings = Settings()
