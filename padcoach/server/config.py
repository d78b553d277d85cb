# padcoach/server/config.py
"""Server configuration with sensible defaults for local use."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, overridable via environment variables."""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8095

    # Storage
    DATA_DIR: Path = Path("data")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    model_config = SettingsConfigDict(env_prefix="PADCOACH_", env_file=".env", extra="ignore")


settings = Settings()
