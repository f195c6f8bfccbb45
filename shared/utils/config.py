"""
Configuration Management
Environment-based settings shared by the resource services
"""

import sys
from typing import List, Optional, Type, TypeVar

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

SettingsT = TypeVar("SettingsT", bound=BaseSettings)


class BaseServiceSettings(BaseSettings):
    """Settings every process needs: where to listen and how to log"""

    service_name: str = "service"
    service_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_config: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v


class ServiceSettings(BaseServiceSettings):
    """Settings for a resource service backed by Supabase"""

    supabase_url: str
    supabase_anon_key: str
    cors_origins: List[str] = ["*"]

    @field_validator("supabase_url", "supabase_anon_key")
    @classmethod
    def validate_required(cls, v, info):
        if not v or not v.strip():
            raise ValueError(f"{info.field_name.upper()} must be set")
        return v.strip()

    def log_config_summary(self):
        """Log configuration (without the store credential)"""
        logger.info(
            "Service configuration loaded",
            service=self.service_name,
            port=self.port,
            supabase_url=self.supabase_url[:20] + "...",
        )


def load_settings(settings_cls: Type[SettingsT]) -> SettingsT:
    """
    Load settings or terminate the process.

    Configuration errors are fatal: the process exits with status 1 before
    any listening socket is bound.
    """
    try:
        return settings_cls()
    except ValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]).upper() for err in e.errors()]
        logger.error("Invalid configuration", settings=settings_cls.__name__, fields=missing)
        sys.exit(1)
