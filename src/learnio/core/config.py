"""Configuration management for the Learnio upload service."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    ENV: str = "local"
    SERVICE_NAME: str = "learnio-server"
    SERVICE_VERSION: str = "0.1.0"
    LOG_LEVEL: str = ""  # Empty = DEBUG locally, INFO elsewhere

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Upload Configuration
    UPLOAD_DIR: str = "./public/images"
    PUBLIC_PATH_PREFIX: str = "/images"
    UPLOAD_FIELD_NAME: str = "image"
    CREATE_UPLOAD_DIR: bool = True
    MAX_NAME_ATTEMPTS: int = 3  # Regenerate the name if a blob already exists
    UPLOAD_CHUNK_SIZE: int = 65536  # 64KB

    # CORS Configuration (comma-separated)
    CORS_ORIGINS: str = "http://localhost:5173,https://learnio-psi.vercel.app"
    CORS_METHODS: str = "GET,POST,PATCH,PUT,DELETE"
    CORS_HEADERS: str = "Content-Type,Authorization"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level and level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            raise ValueError(f"LOG_LEVEL must be empty or one of {allowed}, got {value!r}")
        return level

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return _split_csv(self.CORS_ORIGINS)

    @property
    def cors_methods(self) -> list[str]:
        """Parse CORS_METHODS into a list."""
        return _split_csv(self.CORS_METHODS)

    @property
    def cors_headers(self) -> list[str]:
        """Parse CORS_HEADERS into a list."""
        return _split_csv(self.CORS_HEADERS)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# Singleton settings instance
settings = Settings()
