from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False, extra="ignore")

    # Core
    DATABASE_URL: str
    ALLOWED_ORIGINS: str | None = "*"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Listing
    DEFAULT_PAGE_SIZE: int = 10
    DROPDOWN_LIMIT: int = 25

    # Auth
    AUTH_TOKEN_SECRET: str
    AUTH_TOKEN_TTL_SECONDS: int = 86400
    AUTH_TOKEN_ALGORITHM: str = "HS256"

    @property
    def cors_origins(self) -> List[str]:
        if not self.ALLOWED_ORIGINS:
            return []
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()  # type: ignore[call-arg]
