from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Vacation Calculator"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:8000"]

    # Calendar rules
    israel: bool = True
    include_hol_hamoed_default: bool = True
    default_language: Literal["en", "he"] = "en"
    # Longest range a single request may span, in days.
    max_range_days: int = Field(default=3660, ge=1)

    # Observances some workplaces treat as half days.
    half_day_observances: list[str] = ["Rosh Hashana LaBehemot", "Tu BiShvat"]
    # National days treated as full days off.
    national_observances: list[str] = ["Yom HaZikaron", "Yom HaAtzmaut", "Yom Yerushalayim"]


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

