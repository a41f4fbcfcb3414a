"""Localization configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LocalizationSettings(BaseSettings):
    """String table configuration settings.

    Environment Variables:
        LOCALIZATION_STRINGS_FILE: Path to a YAML or .xcstrings string file.
            Empty means no table, so every key renders as its lookup name.
        LOCALIZATION_STRINGS_LANGUAGE: Language read from .xcstrings catalogs.
        LOCALIZATION_LOG_MISSING_KEYS: Log lookups that fall back to the key.
    """

    STRINGS_FILE: str = Field(default="", alias="LOCALIZATION_STRINGS_FILE")
    STRINGS_LANGUAGE: str = Field(default="en", alias="LOCALIZATION_STRINGS_LANGUAGE")
    LOG_MISSING_KEYS: bool = Field(default=True, alias="LOCALIZATION_LOG_MISSING_KEYS")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("STRINGS_LANGUAGE")
    @classmethod
    def validate_language(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("LOCALIZATION_STRINGS_LANGUAGE must not be empty")
        return value.strip()


class Settings(BaseSettings):
    """Application configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    localization: LocalizationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "localization": LocalizationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
