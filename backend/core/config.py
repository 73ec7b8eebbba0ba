"""
Backend Configuration

Pydantic settings for the scene proxy service.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # CORS
    cors_origins: List[str] = Field(default=["*"])

    # Gemini
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(default="gemini-2.5-pro")
    temperature: float = Field(default=0.7)
    request_timeout: Optional[float] = Field(default=None)

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.strip())


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
