# quiz_backend/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Quiz Backend API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # MongoDB
    # No default: the service refuses to start without a connection string
    MONGO_URI: str | None = None
    MONGO_DB_NAME: str = "quiz"  # used when the URI does not name a database
    MONGO_COLLECTION: str = "questions"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGO_APPLY_SCHEMA: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
