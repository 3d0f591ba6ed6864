from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    APP_TITLE: str = "Local Library"
    ENVIRONMENT: str = "development"

    # Database settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./catalog.db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5
    DB_CREATE_TABLES: bool = True

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    # Paths to exclude from access logs (e.g., /metrics, /health)
    LOG_EXCLUDED_PATHS: list[str] = ["/metrics", "/health"]

    # HTTP settings
    ALLOWED_HOSTS: list[str] = ["*"]
    MAX_REQUEST_BODY_SIZE: int = 1024 * 1024
    GZIP_MINIMUM_SIZE: int = 500

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject log levels the logging module does not know."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def IS_SQLITE(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


app_settings = Settings()
