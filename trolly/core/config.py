"""Application configuration."""

from typing import Literal

from pydantic_settings import BaseSettings

from .contract import untitled_label


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 52790

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./trolly.db"
    DATABASE_ECHO: bool = False

    # Localization of inserted defaults
    LOCALE: str = "en"
    UNTITLED_LABEL: str | None = None  # Overrides the localized label when set

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def untitled_label(self) -> str:
        """Label stored for items inserted without a name."""
        if self.UNTITLED_LABEL is not None:
            return self.UNTITLED_LABEL
        return untitled_label(self.LOCALE)

    model_config = {"env_prefix": "TROLLY_", "env_file": ".env"}


settings = Settings()
