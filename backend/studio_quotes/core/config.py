from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from typing import Any
import json
from pathlib import Path
import os


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # CORS origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:9002"]
    CORS_ALLOW_ALL: bool = False

    # Studio branding used on quotes and in the AI summary prompt
    STUDIO_NAME: str = "WRH Enigma"
    STUDIO_EMAIL: str = ""
    STUDIO_PHONE: str = ""
    # Location key that never carries a travel fee
    HOME_CITY: str = "dubai"

    # Default currency code used across the application
    DEFAULT_CURRENCY: str = "AED"

    # Days a generated quote stays valid (printed on the PDF terms)
    QUOTE_VALIDITY_DAYS: int = 30
    # Advance payment percentage printed on the PDF terms
    ADVANCE_PAYMENT_PERCENT: int = 50

    # Gemini credentials for the quote summary. Empty key disables the call
    # and the static fallback summary is used instead.
    GOOGLE_GENAI_API_KEY: str = ""
    GOOGLE_GENAI_MODEL: str = "gemini-2.5-flash"
    GENAI_TIMEOUT_SECONDS: float = 6.0

    # Logging / tracing
    LOG_LEVEL: str = "INFO"
    ENABLE_CONSOLE_TRACING: bool = False

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("GOOGLE_GENAI_API_KEY", "GOOGLE_GENAI_MODEL", "STUDIO_NAME", "HOME_CITY", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("DEFAULT_CURRENCY", mode="before")
    def upper_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or "AED"
        return v

    @model_validator(mode="after")
    def allow_all_if_requested(cls, values: "Settings") -> "Settings":
        if values.CORS_ALLOW_ALL:
            values.CORS_ORIGINS = ["*"]
        return values

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
    )


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()
