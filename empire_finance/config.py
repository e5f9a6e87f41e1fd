"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="EMPIRE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    database_url: str = "sqlite:///./empire.db"

    # Service
    service_name: str = "empire-finance"
    log_level: str = "INFO"

    # Game policy
    loan_default_threshold: int = 3  # missed payments before a loan defaults
    save_slot_limit: int = 20


settings = Settings()
