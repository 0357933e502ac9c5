from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Unset means no-database mode: reads come back empty, writes fail with 503
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    SECRET_KEY: str = "dev-secret-key-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days
    COOKIE_NAME: str = "app_session_id"
    COOKIE_SECURE: bool = False

    OWNER_OPEN_ID: Optional[str] = None
    DEV_LOGIN_ENABLED: bool = False

    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
