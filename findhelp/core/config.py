from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    OPENING_STATUS_CACHE_MAX_SIZE: int = Field(500, gt=0)
    OPENING_STATUS_CACHE_DURATION_MS: int = 60_000
    OPENING_STATUS_SWEEP_INTERVAL_SECONDS: float = 300.0
    OPENING_STATUS_SWEEP_ENABLED: bool = True


settings = Settings()
