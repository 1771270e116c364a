from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List, Union

import os

class Settings(BaseSettings):
    # Base directory calculation (backend/app/core/config.py -> backend/)
    BASE_DIR: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    # Project root (backend/ -> root/)
    PROJECT_ROOT: str = os.path.dirname(BASE_DIR)

    # Strip to handle trailing whitespace from shell-exported values
    DATA_DIR: str = os.path.normpath(os.getenv("DATA_DIR", os.path.join(PROJECT_ROOT, "data")).strip())

    # Database
    DATABASE_URL: str = f"sqlite:///{os.path.join(DATA_DIR, 'hacktrack.db')}"

    # JWT
    JWT_SECRET_KEY: str = "change-me-in-env"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480  # 8 hours

    # CORS - can be comma-separated string or list
    CORS_ORIGINS: Union[str, List[str]] = "http://localhost:5173"

    # Temporary credentials issued on approval: HT-XXXXXXXX!
    TEMP_PASSWORD_PREFIX: str = "HT-"
    TEMP_PASSWORD_SUFFIX: str = "!"
    TEMP_PASSWORD_LENGTH: int = 8

    # Notification feed
    NOTIFICATION_FETCH_LIMIT: int = 50
    # "page": unread count derived from the fetched page (may under-count)
    # "server": COUNT(*) over every unread row
    UNREAD_COUNT_MODE: str = "page"

    # AI assistant (OpenAI-compatible chat completions gateway)
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_API_KEY: Optional[str] = None
    AI_MODEL: str = "google/gemini-3-flash-preview"
    AI_TIMEOUT_SECONDS: int = 60

    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS to list format"""
        if not self.CORS_ORIGINS:
            return ["http://localhost:5173"]
        if isinstance(self.CORS_ORIGINS, list):
            origins = self.CORS_ORIGINS
        else:
            origins = [
                origin.strip()
                for origin in self.CORS_ORIGINS.split(",")
                if origin.strip()
            ]
        if "*" in origins:
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' when allow_credentials=True. "
                "Use explicit origins like http://localhost:5173"
            )
        return origins

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
