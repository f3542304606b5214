"""
Application configuration with environment-driven settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``AGENDA_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="AGENDA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:3002/contacts",
        description="Collection URL of the contacts JSON backend",
    )
    log_level: str = "INFO"

    # Page header
    app_title: str = "Agenda ADSO v7"
    app_subtitle: str = (
        "Contact management backed by a local JSON Server API, "
        "with validation and a better user experience."
    )
    course_number: str = "3169901"


@lru_cache
def get_settings() -> Settings:
    return Settings()
