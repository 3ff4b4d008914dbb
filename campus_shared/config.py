"""
Base settings shared by every campus service
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "fallback_secret"


class BaseServiceSettings(BaseSettings):
    # App config
    service_name: str = "campus-service"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"
    logging_config_path: Optional[str] = None

    # Network
    host: str = "0.0.0.0"
    port: int = 8000

    # JWT - must be identical across every service
    jwt_secret_key: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = "HS256"

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def secret_configured(self) -> bool:
        """True when the signing secret was overridden from the default"""
        return self.jwt_secret_key != DEFAULT_JWT_SECRET
