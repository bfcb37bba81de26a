"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    ai_gateway_api_key: str
    ai_gateway_base_url: str | None = "https://ai.gateway.lovable.dev/v1"
    ai_model: str = "google/gemini-3-flash-preview"
    ai_timeout_seconds: float = 20.0
    recommendation_limit: int = 5
    log_level: str = "INFO"
    cors_allowed_origins: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env; empty or '*' allows any."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins = [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
    return origins or ["*"]
