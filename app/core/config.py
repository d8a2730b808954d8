"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_OUTDOOR_SPORTS, DEFAULT_REWARD_THRESHOLDS, DEFAULT_TEAM_SPORTS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "SchoolFit: school fitness tracker."
    VERSION: str = "0.1.0"
    PROJECT_URL: str = "https://github.com/schoolfit/schoolfit"

    DEBUG: bool = True

    # Database
    # A full URL takes precedence over the individual parts below.
    DATABASE_URL: str = ""
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Geo restriction (x-vercel-ip-country header)
    GEO_RESTRICTION_ENABLED: bool = False
    ALLOWED_COUNTRIES: List[str] = [
        "ES", "FR", "DE", "IT", "PT", "NL", "BE", "LU", "IE", "GB",
        "SE", "NO", "FI", "DK", "PL", "CZ", "AT", "CH", "HU", "GR",
        "RO", "BG", "HR", "SI", "SK", "LT", "LV", "EE", "IS",
    ]

    # Rewards
    REWARD_THRESHOLDS: List[int] = list(DEFAULT_REWARD_THRESHOLDS)
    TEAM_SPORTS: List[str] = list(DEFAULT_TEAM_SPORTS)
    OUTDOOR_SPORTS: List[str] = list(DEFAULT_OUTDOOR_SPORTS)

    # Group overview window
    RECENT_SESSIONS_DAYS: int = 60

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("ALLOWED_COUNTRIES")
    @classmethod
    def upper_countries(cls, v: List[str]) -> List[str]:
        return [c.strip().upper() for c in v]

    @property
    def database_url(self) -> str:
        """Connection URL, assembled from the ``DATABASE_*`` parts when not given."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
