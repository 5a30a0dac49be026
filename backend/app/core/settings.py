# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="Portfolio API", alias="API_TITLE")
    cors_origins: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")

    # Static page; if unset we use <project-root>/frontend
    frontend_root: Optional[str] = Field(default=None, alias="FRONTEND_ROOT")

    # SMTP transport. Kept as raw strings so a bad value fails the send, not startup.
    smtp_host: Optional[str] = Field(default=None, alias="SMTP_HOST")
    smtp_port: str = Field(default="587", alias="SMTP_PORT")
    smtp_secure: str = Field(default="false", alias="SMTP_SECURE")
    smtp_user: Optional[str] = Field(default=None, alias="SMTP_USER")
    smtp_pass: Optional[str] = Field(default=None, alias="SMTP_PASS")
    smtp_timeout: str = Field(default="30", alias="SMTP_TIMEOUT")
    from_email: Optional[str] = Field(default=None, alias="FROM_EMAIL")
    to_email: Optional[str] = Field(default=None, alias="TO_EMAIL")

    # "en" or "ja"
    mail_locale: str = Field(default="en", alias="MAIL_LOCALE")

    # Reject blank fields / malformed addresses with 400 instead of relaying them
    contact_strict_validation: str = Field(default="false", alias="CONTACT_STRICT_VALIDATION")


def as_flag(raw: Optional[str]) -> bool:
    """Only "true" (any case) switches a flag on; anything else is off."""
    return (raw or "").strip().lower() == "true"

settings = Settings()
