# File: funapp/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Fun App API"
    VERSION: str = "1.0.0"

    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./funapp.db")

    # Signup is only allowed from cities in this country
    allowed_country: str = os.getenv("ALLOWED_COUNTRY", "Egypt")

    # Security / auth
    jwt_secret: Optional[str] = os.getenv("JWT_SECRET") or None
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15"))
    algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    def require_jwt_secret(self) -> str:
        if not self.jwt_secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        return self.jwt_secret


@lru_cache
def get_settings() -> Settings:
    return Settings()
