"""
Configuration Management
Environment-based configuration for the Supabase connection and the HTTP server
"""

from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class GatewayConfig(BaseSettings):
    """Gateway Configuration"""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service info
    service_name: str = "directory-gateway"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = 3009

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # CORS
    cors_allowed_origins: str = "*"

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("Log format must be 'json' or 'console'")
        return v

    def supabase_configured(self) -> bool:
        """Check if both Supabase credentials are present"""
        return bool(self.supabase_url and self.supabase_anon_key)

    def get_cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]
        return origins or ["*"]

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(
            "Gateway configuration",
            environment=self.environment,
            host=self.host,
            port=self.port,
            supabase_url=self.supabase_url or None,
            supabase_key_set=bool(self.supabase_anon_key),
            cors_origins=self.get_cors_origins(),
        )


_config: Optional[GatewayConfig] = None


def get_config() -> GatewayConfig:
    """Get gateway configuration instance"""
    global _config
    if _config is None:
        _config = GatewayConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access re-reads the environment"""
    global _config
    _config = None
