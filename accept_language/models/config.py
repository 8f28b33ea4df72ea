from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development' for console logs, anything else for JSON",
    )
    LOG_LEVEL: str | None = Field(
        default=None,
        description="Override the log level chosen from ENVIRONMENT",
    )

    # Negotiation behaviour
    ALLOW_LEADING_DOT_QVALUE: bool = Field(
        default=False,
        description="Accept the non-standard '.8' quality shorthand (RFC 7231 requires '0.8')",
    )
    PRIMARY_FALLBACK: bool = Field(
        default=False,
        description="Let 'zh-TW' fall back to an available 'zh' when nothing else matches it",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str | None:
        """Uppercase the level name; treat an empty value as unset."""
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v

    model_config = SettingsConfigDict(
        env_prefix="ACCEPT_LANGUAGE_",
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance."""
    return settings
