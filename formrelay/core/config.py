from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_CONTACT_EMAIL = "hello@example.com"


class Settings(BaseSettings):
    # Notification recipient; falls back to the built-in address when unset
    contact_email: Optional[str] = None

    # Resend credentials - leaving the key unset disables outbound email
    resend_api_key: Optional[str] = None
    resend_api_url: str = "https://api.resend.com"
    email_from: str = "Contact Form <onboarding@resend.dev>"
    email_timeout: float = 10.0

    # Zone used for the timestamp footer of notification emails
    display_timezone: str = "UTC"

    # CORS settings
    allowed_origins: list[str] = ["*"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("contact_email", "resend_api_key", mode="before")
    @classmethod
    def blank_as_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("display_timezone")
    @classmethod
    def known_timezone(cls, value):
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{value}'") from e
        return value

    @property
    def effective_contact_email(self) -> str:
        """Get the notification recipient, falling back to the default address"""
        return self.contact_email or DEFAULT_CONTACT_EMAIL

    @property
    def email_enabled(self) -> bool:
        return bool(self.resend_api_key)


@lru_cache
def get_settings():
    return Settings()
