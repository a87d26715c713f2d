# File: roomify_api/core/config.py

import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Roomify Projects API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    debug: bool = os.getenv("DEBUG", "").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./roomify.db")

    # Bearer tokens
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = 60 * 24  # 24h
    algorithm: str = "HS256"

    # Key-value namespaces
    private_prefix: str = os.getenv("PRIVATE_PREFIX", "roomify_project_")
    public_prefix: str = os.getenv("PUBLIC_PREFIX", "roomify_public_")
    public_scope: str = os.getenv("PUBLIC_SCOPE", "__public__")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
