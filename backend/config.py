import os
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field
import platformdirs

APP_NAME = "TrackLibrary"
APP_AUTHOR = "TrackLibraryDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR

    # Database
    # DB_PATH, when set, takes precedence over DB_DIR / DB_NAME
    DB_DIR: str = "database"
    DB_NAME: str = "music_library.db"
    DB_PATH: str | None = None
    SQL_ECHO: bool = False
    CREATE_SCHEMA_ON_STARTUP: bool = False

    # Network
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_DIR: str = Field(default_factory=lambda: platformdirs.user_log_dir(APP_NAME, APP_AUTHOR))
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def model_post_init(self, __context):
        if not self.DB_PATH:
            self.DB_PATH = os.path.join(self.DB_DIR, self.DB_NAME)

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.DB_PATH}"

settings = Settings()
