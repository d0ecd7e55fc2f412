from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

from errors import ConfigurationError


class Settings(BaseSettings):
    # Checked at startup by check_settings() rather than failing on import
    openai_api_key: str = ""
    allowed_origins: str = "http://localhost:3000"

    # Optional: set to use OpenRouter or any OpenAI-compatible provider
    # e.g. https://openrouter.ai/api/v1
    openai_base_url: Optional[str] = None

    chat_model: str = "gpt-4o-mini"

    # Fixed per content kind, never taken from the caller
    flashcards_temperature: float = 0.3
    quiz_temperature: float = 0.5

    completion_timeout_seconds: float = 30.0
    completion_max_tokens: int = 2500
    max_concurrent_completions: int = 8

    log_level: str = "INFO"

    @property
    def origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def check_settings(settings: Settings) -> Settings:
    """Validate settings the service cannot start without."""
    if not settings.openai_api_key.strip():
        raise ConfigurationError("OPENAI_API_KEY is not set")
    if settings.max_concurrent_completions < 1:
        raise ConfigurationError("MAX_CONCURRENT_COMPLETIONS must be at least 1")
    if settings.completion_timeout_seconds <= 0:
        raise ConfigurationError("COMPLETION_TIMEOUT_SECONDS must be positive")
    return settings
