from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Manages admin and customer portal configuration using environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "fixitnow"

    SECRET_KEY: str = "insecure-test-key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    CUSTOMER_TOKEN_EXPIRE_MINUTES: int = 24 * 60
    # Admin registration is refused while this is unset.
    ADMIN_SECRET: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]


settings = Settings()
