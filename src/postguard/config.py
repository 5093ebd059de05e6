"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from postguard.core.constants import DEFAULT_PAGE_SIZE, LOG_LEVELS, MAX_PAGE_SIZE


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be overridden with a ``POSTGUARD_`` prefixed variable,
    e.g. ``POSTGUARD_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSTGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "postguard"
    environment: str = "development"  # development, staging, production

    # Error documentation
    api_docs_base_url: str = "https://docs.example.com/postguard"

    # Observability
    log_level: str = "INFO"
    log_permission_decisions: bool = False

    # Pagination
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = MAX_PAGE_SIZE

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise the log level and reject unknown names.

        Args:
            v: The configured level name

        Returns:
            The upper-cased level name

        Raises:
            ValueError: If the level is not a standard logging level
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Page sizes must be positive."""
        if v < 1:
            raise ValueError("page sizes must be at least 1")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
