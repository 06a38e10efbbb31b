"""Package settings, read from ``SQLBUILD_*`` environment variables or ``.env``."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLBUILD_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Compiled-template LRU size; 0 disables caching.
    TEMPLATE_CACHE_SIZE: int = Field(default=512, ge=0)
    # How much of the template to show in error messages.
    ERROR_PREVIEW_LENGTH: int = Field(default=500, ge=0)
    LOG_QUERIES: bool = False


settings = Settings()  # type: ignore
