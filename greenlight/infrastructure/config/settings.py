from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    PORT: int = 4000
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Connection pool
    DB_CONNECT_TIMEOUT: float = 5.0
    DB_POOL_SIZE: int = 25
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_RECYCLE: int = 900
