from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApplicationSettings(BaseSettings):
    name: str = "Posts Gateway"

    release_ver: str = "development"

    # error details are only exposed to clients in development
    environment: Literal["production", "development"] = "production"
    storage_backend: Literal["supabase", "postgres"] = "supabase"
    cors_allow_origins: list[str] = ["*"]  # noqa: RUF012

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"
