from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    APP_NAME: str = "Health Care Backend"

    # Database Settings
    DATABASE_URL: str = "sqlite:///./health_care.db"
    DATABASE_ECHO: bool = False

    # Password hashing cost factor
    BCRYPT_ROUNDS: int = 10

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logger"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
