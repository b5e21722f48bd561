"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # OpenAI-compatible chat-completion API
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    default_model: str = "gpt-4o-mini"
    openai_timeout_seconds: float = 60.0

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8787
    allowed_origin: str = "*"
    rate_limit_interval_ms: int = 750
    max_body_bytes: int = 1024 * 1024
    frontend_dir: str = "frontend"

    # Storage
    database_url: str = "sqlite:///./recruitai.db"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # CLI client
    api_base_url: str = "http://localhost:8787"

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def cors_origins(self) -> list[str]:
        """Origins handed to CORSMiddleware."""
        if self.allowed_origin == "*":
            return ["*"]
        return [origin.strip() for origin in self.allowed_origin.split(",") if origin.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
