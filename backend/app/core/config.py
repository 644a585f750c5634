from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    APP_NAME: str = "Provexi API"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    # Match store: "memory" serves the generated snapshot directly,
    # "database" seeds and queries DATABASE_URL through SQLAlchemy
    MATCH_STORE: str = "memory"
    DATABASE_URL: str = "sqlite:///./provexi.db"

    # Mock dataset
    MOCK_MATCH_COUNT: int = 20
    MOCK_SEED: Optional[int] = None

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 20
    MAX_PAGE_LIMIT: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
