from pydantic import BaseModel
import os

class Settings(BaseModel):
    DATABASE_URL_SYNC: str = os.getenv("DATABASE_URL", "sqlite:///./mailbox.db")
    DATABASE_URL_ASYNC: str = os.getenv("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///./mailbox.db")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://redis:6379/0")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # deployment identity of the game server
    APP_ENV: str = os.getenv("APP_ENV", "production")
    GAME_TYPE: str = os.getenv("GAME_TYPE", "vendetta")
    GAME_SERVER_NAME: str | None = os.getenv("GAME_SERVER_NAME") or None

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None

settings = Settings()
