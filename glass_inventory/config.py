"""
Configuration management.
Simple .env based config for the inventory store and its API.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Database
    database_driver: str = "sqlite"
    database_path: str = "./data/inventory.db"  # file path, ":memory:" or "file:" URI

    # Logging
    log_level: str = "INFO"
    log_file: str = "./data/inventory.log"  # empty string = stdout only


# Global settings instance
settings = Settings()
