"""Application settings using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PERMANENT_REDIRECT_STATUSES = (301, 308)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = Field(
        default="INFO",
        description="Root log level for the API process",
    )

    # Path canonicalization
    clean_path_enabled: bool = Field(
        default=True,
        description="Install the path canonicalization middleware",
    )
    clean_path_redirect_status: int = Field(
        default=308,
        description="Status code for canonical path redirects (301 or 308)",
    )
    clean_path_absolute_redirects: bool = Field(
        default=True,
        description="Keep scheme and host in the Location header. False = path and query only.",
    )

    @field_validator("clean_path_redirect_status")
    @classmethod
    def _check_permanent_redirect(cls, value: int) -> int:
        if value not in PERMANENT_REDIRECT_STATUSES:
            raise ValueError(
                f"clean_path_redirect_status must be one of {PERMANENT_REDIRECT_STATUSES}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
