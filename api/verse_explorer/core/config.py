"""
Configuration module using Pydantic Settings.

Loads the Groq credential, endpoint and model name from environment
variables. Supports .env files for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_api_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama3-8b-8192"
    request_timeout_seconds: float = 60.0

    # Telemetry
    otel_console_export: bool = False

    # App
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]


def get_settings() -> Settings:
    """Factory for settings instance."""
    return Settings()
