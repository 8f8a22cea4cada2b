from pydantic_settings import BaseSettings
from typing import Optional, List

class Settings(BaseSettings):
    PROJECT_NAME: str = "Stage Certification API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1 day

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./stagecert.db"

    # Test administration
    QUESTIONS_PER_TEST: int = 20
    TEST_TIME_LIMIT_MINUTES: int = 30
    EXPIRY_SWEEP_INTERVAL_SECONDS: int = 60

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    TESTING: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
