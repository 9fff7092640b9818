from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, read from DEMOCODE_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="DEMOCODE_", env_file=".env", extra="ignore"
    )

    title: str = "democode"
    version: str = "1.0.0"

    host: str = "127.0.0.1"
    port: int = 8080

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
