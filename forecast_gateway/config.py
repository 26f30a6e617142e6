from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_gateway.core.errors import ConfigurationError
from forecast_gateway.core.types import ResponseMode


class Settings(BaseSettings):
    """Process configuration loaded from environment variables and `.env`."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4"
    openai_temperature: float = 0.7
    openai_base_url: str | None = None

    forecast_response_mode: ResponseMode = ResponseMode.STRUCTURED

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def require_api_key(self) -> str:
        if not self.openai_api_key or not self.openai_api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not defined.")
        return self.openai_api_key


def load_settings() -> Settings:
    return Settings()
