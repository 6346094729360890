"""Application configuration."""

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from geodoc.models.config import ProjectionConfig


class Settings(BaseSettings):
    """
    Application settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    app_name: str = "geodoc"
    version: str = "0.1.0"

    # Projection Settings
    LANGUAGES: Annotated[list[str], NoDecode] = Field(
        default=["en", "de", "fr", "it"],
        description="Language codes exposed in name sections, in output order",
    )
    EXTRA_TAGS: Annotated[list[str], NoDecode] = Field(
        default=[],
        description="Free-form tag keys copied into the extra section",
    )

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @field_validator("LANGUAGES", "EXTRA_TAGS", mode="before")
    @classmethod
    def split_list(cls, value: object) -> object:
        """Accept a JSON list or a comma-separated string."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [item.strip() for item in stripped.split(",") if item.strip()]
        return value

    def projection_config(self) -> ProjectionConfig:
        """Snapshot the projection-related settings."""
        return ProjectionConfig(languages=self.LANGUAGES, extra_tags=self.EXTRA_TAGS)

