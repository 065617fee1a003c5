from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: Optional[str] = "talk-ratings-stats"
    STATS_PORT: Optional[int] = 8000

    # URL of the deployed stats function, used by the ratings side to fetch averages
    STATS_FUNCTION_URL: Optional[str] = "http://localhost:8000/"
    STATS_CLIENT_TIMEOUT: Optional[float] = 5.0

    # Negative counts are summed like any other count unless this is turned off
    ALLOW_NEGATIVE_COUNTS: Optional[bool] = True

    LOG_LEVEL: Optional[str] = "INFO"
    LOG_DIR: Optional[str] = "logs"
    LOG_TO_FILE: Optional[bool] = False

settings = Settings()
