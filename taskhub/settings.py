"""Application settings loaded from environment variables."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    port: int = Field(ge=1, le=65535)
    database_url: str
    environment: Literal["development", "production", "test"] = "development"

    host: str = "0.0.0.0"
    service_name: str = "taskhub"
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    database_echo: bool = False
    allowed_origins: list[str] = ["*"]

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        try:
            url = make_url(value)
        except ArgumentError as exc:
            raise ValueError(f"Invalid database URL: {exc}") from exc
        if not url.database:
            raise ValueError("Database URL must name a database")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
