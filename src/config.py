"""Application settings, read from the environment (prefix ``WAREHOUSE_``) or a ``.env`` file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Security
    JWT_SECRET: str = "warehouse-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 8 * 60

    # Demo data
    SEED_DEMO_DATA: bool = True

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
