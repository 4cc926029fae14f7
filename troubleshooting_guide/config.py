from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Storage Configuration
    # "memory" keeps devices and trees in process (seeded from data/), "database" uses DATABASE_URL
    STORAGE_BACKEND: Literal["memory", "database"] = "memory"
    DATABASE_URL: str = "sqlite:///./troubleshooting_guide.db"
    SEED_BUILTIN_DATA: bool = True

    # Navigation
    # Step count at which the progress bar reads 100%
    PROGRESS_EXPECTED_STEPS: int = 5

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
