from pydantic_settings import BaseSettings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str = "sqlite:///./inkwell.db"
    # Auth
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24 * 7
    password_reset_expiration_minutes: int = 60
    # Logging
    log_level: str = "INFO"
    debug: bool = False
    # CORS
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]
    # Links in outgoing email point at the web client
    frontend_url: str = "http://localhost:5173"
    # Email
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_use_tls: bool = True
    email_from: Optional[str] = None
    # Telemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"

    class Config:
        env_file = ".env"
        case_sensitive = False


def validate_settings(settings: Settings) -> None:
    """Validate required settings"""
    errors = []

    # Security
    if not settings.jwt_secret_key:
        errors.append("JWT_SECRET_KEY is required")

    if settings.jwt_expiration_hours <= 0:
        errors.append("JWT_EXPIRATION_HOURS must be positive")

    if settings.password_reset_expiration_minutes <= 0:
        errors.append("PASSWORD_RESET_EXPIRATION_MINUTES must be positive")

    # Email
    if settings.smtp_host and not settings.email_from:
        errors.append("EMAIL_FROM is required when SMTP_HOST is set")

    if errors:
        error_message = "Configuration errors:\n" + "\n".join(f"  - {error}" for error in errors)
        raise ValueError(error_message)

    logger.info("Settings validated successfully")
