from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Emulated response delay (milliseconds)
    DELAY_MIN_MS: int = 100
    DELAY_MAX_MS: int = 300

    # Coupon catalog; None means the packaged data/cpn-list.json
    CPN_CATALOG_PATH: Optional[str] = None

    # Application
    API_PREFIX: str = "/api/back/v1"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
