"""Module: config."""

from pathlib import Path

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parents[2]


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    app_name: str = "Pet Care API"
    app_version: str = "1.0.0"
    # development | production | test
    environment: str = "development"

    # Primary SQLAlchemy connection string for the backend database.
    database_url: str = "sqlite:///./petcare.db"

    # Token signing for the Authorization: Bearer header.
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7

    port: int = 3000
    # Comma separated list of origins, or "*".
    allowed_origins: str = "*"

    upload_dir: str = str(BACKEND_DIR / "uploads")
    max_upload_bytes: int = 5 * 1024 * 1024

    log_level: str = "INFO"

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Global settings instance imported by app modules at runtime.
settings = Settings()
