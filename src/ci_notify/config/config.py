# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

The pipeline-facing variables are flat (NOTIFICATION_TYPE, SEVERITY, RESEND_API_KEY, ...).
Ambient sections use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, RESEND__TIMEOUT_SECONDS.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "ci-notify"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "production"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/ci_notify.log"

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class NotificationSettings(BaseSettings):
    """Pipeline inputs for a single notification run (flat env vars, no prefix).

    Empty strings are kept as-is here; defaults for incident fields are applied
    when the incident context is built, so NOTIFICATION_TYPE="" and SEVERITY=""
    behave like unset variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    notification_type: Optional[str] = Field(
        default=None,
        description="Variant selector: incident-escalation or daily-digest.",
    )
    diagnosis_file: str = Field(
        default="diagnosis.json",
        description="Path to the optional diagnosis JSON produced by an upstream step.",
    )
    digest_file: str = Field(
        default="daily-digest.html",
        description="Path to the pre-rendered daily digest HTML.",
    )
    incident_id: Optional[str] = None
    severity: Optional[str] = None
    error: Optional[str] = None
    root_cause: Optional[str] = None
    from_email: Optional[str] = Field(
        default=None,
        description="Sender address; each variant has its own default.",
    )
    recipient_email: Optional[str] = Field(default=None, description="Single recipient address.")
    github_repository: str = Field(
        default="owner/repo",
        description="owner/name used for the GitHub Actions link.",
    )


class ResendSettings(BaseSettings):
    """Resend transactional email API (https://resend.com)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Resend API key (env: RESEND_API_KEY).",
        validation_alias="resend_api_key",
    )
    api_host: str = Field(
        default="https://api.resend.com",
        description="Resend API base URL.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        ge=1.0,
        le=120.0,
        description="HTTP request timeout in seconds.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Built once at startup and passed explicitly, so the rest of the code
    does not read environment variables directly.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    notification: NotificationSettings = Field(default_factory=NotificationSettings)
    resend: ResendSettings = Field(default_factory=ResendSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts or section objects, e.g.:
        - from_env(resend={"timeout_seconds": 30})
        - from_env(notification=NotificationSettings(severity="high"))

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from ci_notify.config import get_settings

        settings = get_settings()
        diagnosis_path = settings.notification.diagnosis_file
    """
    return Settings()
