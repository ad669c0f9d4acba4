#!/usr/bin/env python3

from pydantic import field_validator
from pydantic_settings import BaseSettings

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    database_url: str = "sqlite:///./webhooks.db"
    log_level: str = "INFO"
    external_hostname: str = "localhost"  # Default to localhost

    # Security headers (disable when a reverse proxy already adds them)
    security_headers_enabled: bool = True
    security_header_hsts_enabled: bool = True
    security_header_hsts_value: str = "max-age=31536000; includeSubDomains"
    security_header_csp_enabled: bool = True
    security_header_csp_value: str = "default-src 'none'; frame-ancestors 'none'"
    security_header_x_frame_options_enabled: bool = True
    security_header_x_frame_options_value: str = "DENY"
    security_header_x_content_type_options_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")
        return level

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
