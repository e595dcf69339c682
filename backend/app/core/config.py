from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage: "memory" keeps the seeded demo store, "sql" uses DATABASE_URL
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./recruitflow.db"
    SEED_DEMO_DATA: bool = True

    # n8n automation webhooks
    APPLICATION_WEBHOOK_URL: str = "https://vidhiii.app.n8n.cloud/webhook/submit-application"
    CANDIDATE_ACTION_WEBHOOK_URL: str = "https://vidhiii.app.n8n.cloud/webhook/candidate_action"
    WEBHOOK_TIMEOUT_SECONDS: Optional[float] = 60.0

    # Application
    APP_NAME: str = "RecruitFlow"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    BACKEND_CORS_ORIGINS: str = (
        "http://localhost:5000,"
        "http://localhost:5173,"
        "http://127.0.0.1:5000,"
        "http://127.0.0.1:5173"
    )


settings = Settings()
