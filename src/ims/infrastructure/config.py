"""Application settings, loaded from ``IMS_``-prefixed environment variables.

An optional ``.env`` file in the working directory is read as well.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field("development", description="development, test, staging or production")
    log_level: str | None = Field(None, description="Overrides the per-environment log level")

    data_dir: Path = Field(_DEFAULT_DATA_DIR, description="Directory holding products.json")

    # Notifications
    email_backend: str = Field("log", description="smtp, ses, sendgrid, mailgun or log")
    mail_from: str = Field("no-reply@example.com", description="Sender address for every backend")
    notification_recipient: str = Field(
        "inventory@example.com", description="Who is told about newly created products"
    )
    log_mailer_echo: bool = Field(False, description="Echo LogMailer messages to the console")
    http_timeout: float = Field(10.0, description="Timeout in seconds for HTTP mail APIs")

    # SMTP
    smtp_host: str = "localhost"
    smtp_port: int = 25
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_starttls: bool = False
    smtp_timeout: float = 10.0

    # Amazon SES
    ses_region: str | None = None
    ses_access_key_id: str | None = None
    ses_secret_access_key: str | None = None

    # SendGrid
    sendgrid_api_key: str | None = None

    # Mailgun
    mailgun_api_key: str | None = None
    mailgun_domain: str | None = None
    mailgun_base_url: str = "https://api.mailgun.net"

    @property
    def ses_configured(self) -> bool:
        return bool(self.ses_region)

    @property
    def sendgrid_configured(self) -> bool:
        return bool(self.sendgrid_api_key)

    @property
    def mailgun_configured(self) -> bool:
        return bool(self.mailgun_api_key and self.mailgun_domain)


@lru_cache
def get_settings() -> Settings:
    return Settings()
