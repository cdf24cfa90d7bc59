from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    # --- Project Settings ---
    PROJECT_NAME: str = "Maintenance Server"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    API_PORT: int = 3001
    BASE_DIR: Path = Path(__file__).resolve().parent.parent

    # production serves the built client bundle from STATIC_DIR
    ENVIRONMENT: str = "development"
    STATIC_DIR: Optional[Path] = None

    # --- CORS Settings ---
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # --- Rate Limiting ---
    RESET_RATE_LIMIT: str = "10/minute"

    # --- Logging / Jobs ---
    LOG_LEVEL: str = "INFO"
    PROGRESS_LOG_INTERVAL_SECONDS: int = 60

    # --- Display Client Settings ---
    MAINTENANCE_API_URL: str = "http://localhost:3001"
    CLIENT_POLL_INTERVAL_SECONDS: float = 2.0

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")


settings = Settings()
