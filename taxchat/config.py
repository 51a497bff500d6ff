"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from taxchat.utils.prompts import TAX_ASSISTANT_PROMPT


class Settings(BaseSettings):
    """Centralised settings, read from the environment or a .env file."""

    # Completion API (Google AI). Left unset, the relay answers 500.
    google_api_key: Optional[str] = Field(None)
    completion_model: str = Field("gemini-2.5-flash")
    completion_max_tokens: int = Field(500, gt=0)
    completion_temperature: float = Field(0.7, ge=0.0, le=2.0)
    # None keeps the client library's own default.
    completion_timeout_seconds: Optional[float] = Field(None, gt=0)
    system_prompt: str = Field(TAX_ASSISTANT_PROMPT)

    # Security
    allowed_origins: str = Field("http://localhost:3000,http://localhost:8000")

    # App
    app_env: str = Field("development")
    log_level: str = Field("INFO")

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def completion_configured(self) -> bool:
        """True when an API credential is present."""
        return bool(self.google_api_key and self.google_api_key.strip())

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
