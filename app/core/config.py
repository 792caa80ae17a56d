"""Locale engine configuration settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Localization configuration settings.

    Environment Variables:
        I18N_LOCALES_DIR: Directory holding one sub-directory per locale id
            (default: auto-discover app/locales)
        I18N_DEFAULT_LOCALE: Locale used when a caller does not request one (default: en)
        I18N_DEFAULT_CONFIG_LOCALE: Locale whose system config fills in missing
            rtl/plural_form values (default: zh)
        I18N_USE_CACHE: Whether the YAML registry caches parsed files (default: True)
    """

    LOCALES_DIR: Optional[str] = Field(default=None, alias="I18N_LOCALES_DIR")
    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    DEFAULT_CONFIG_LOCALE: str = Field(
        default="zh", alias="I18N_DEFAULT_CONFIG_LOCALE"
    )
    USE_CACHE: bool = Field(default=True, alias="I18N_USE_CACHE")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Locale engine configuration settings."""

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
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
