"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All config comes from env vars or .env.backend file."""

    DATABASE_URL: str = "sqlite+aiosqlite:///./promptbox.db"
    API_PORT: int = 8721
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    # Editor defaults
    DEFAULT_CONTENT_FORMAT: str = "json"  # json, markdown, xml, yaml or csv
    DEFAULT_CATEGORY: str = "general"

    # External auth API
    AUTH_API_URL: str = "http://localhost:8000/api/v1"
    AUTH_TOKEN_PATH: str = "./.promptbox_token"
    AUTH_TIMEOUT: float = 30.0

    class Config:
        env_file = ".env.backend"
        env_file_encoding = "utf-8"


settings = Settings()
