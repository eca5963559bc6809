# vehicle_stats/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATA_CSV_PATH: str = "data.csv"

    LOG_LEVEL: str = "INFO"

    WEB_HOST: str = "0.0.0.0"
    WEB_PORT: int = 3001
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_LIMIT: int = 5

    # 0 disables the periodic reload job
    RELOAD_INTERVAL_MINUTES: int = 0

settings = Settings()
