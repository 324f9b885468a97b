"""
Configuration settings for GMUnderground Service
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "GMUnderground Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8010

    # Viewer storage ("memory" or "redis")
    STORAGE_BACKEND: str = "memory"
    SESSION_STORAGE_KEY: str = "gmu_user"

    # Redis (only used when STORAGE_BACKEND == "redis")
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 2
    REDIS_PASSWORD: str = ""

    # Notifications (milliseconds)
    NOTIFICATION_TIMEOUT_MS: int = 3000
    NOTIFICATION_TIMEOUT_EXTENDED_MS: int = 5000

    # Simulated latency (seconds)
    AUTH_CHECK_DELAY_SECONDS: float = 0.5
    ACCOUNT_AUTH_CHECK_DELAY_SECONDS: float = 1.0
    PROFILE_SAVE_DELAY_SECONDS: float = 1.5

    # In-memory viewer state
    VIEWER_STATE_TTL_SECONDS: float = 3600.0
    VIEWER_STATE_MAX_VIEWERS: int = 10000
    MAX_TOGGLES_PER_CATALOG: int = 500

    # Contact form relay
    CONTACT_FORM_URL: str = "https://formspree.io/f/movlbnvd"
    CONTACT_TIMEOUT_SECONDS: float = 10.0

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
