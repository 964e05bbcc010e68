import logging
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BANNER_WIDTH, DEFAULT_SECTION_RULE_WIDTH, MAX_RULE_WIDTH


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    app_name: str = Field(default="Menagerie", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Output configuration
    title: str = Field(
        default="OOP CONCEPTS DEMONSTRATION",
        min_length=1,
        description="Title printed in the demonstration banner",
    )
    banner_width: int = Field(
        default=DEFAULT_BANNER_WIDTH,
        ge=1,
        le=MAX_RULE_WIDTH,
        description="Width of the '=' banner rules",
    )
    section_rule_width: int = Field(
        default=DEFAULT_SECTION_RULE_WIDTH,
        ge=1,
        le=MAX_RULE_WIDTH,
        description="Width of the '-' rule under each section heading",
    )

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Root log level")
    log_to_file: bool = Field(
        default=False, description="Also write logs to logs/menagerie.log"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def banner_rule(self) -> str:
        """Full-width rule framing the title and the takeaways."""
        return "=" * self.banner_width

    @computed_field  # type: ignore[prop-decorator]
    @property
    def section_rule(self) -> str:
        """Rule printed under each section heading."""
        return "-" * self.section_rule_width


# Global settings instance
settings: Final = Settings()
