from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.provider_service.application.domain.job_transition import TransitionMode


class Settings(BaseSettings):
    """
    Manages provider portal configuration using environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "fixitnow"
    # Multi-document transactions need a replica set or sharded cluster.
    MONGO_USE_TRANSACTIONS: bool = False
    JOB_TRANSITION_MODE: TransitionMode = TransitionMode.PERMISSIVE

    SECRET_KEY: str = "insecure-test-key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]


settings = Settings()
