# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration, all env-driven, read once at import.
`.env` and `.env.local` are loaded first so local runs match deployment.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()
load_dotenv(Path.cwd() / ".env.local")


class EmailConfig(BaseModel):
    """Everything the notifier needs, passed in explicitly."""

    api_key: Optional[str] = None
    sender: str
    fallback_recipient: str
    recipient_override: Optional[str] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def recipient(self) -> str:
        return self.recipient_override or self.fallback_recipient


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "clinic-intake")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("PORT", os.getenv("SERVICE_PORT", "5000")))

    RESEND_API_KEY: str = os.getenv("RESEND_API_KEY", "")
    RESEND_API_URL: str = os.getenv("RESEND_API_URL", "https://api.resend.com")
    RESEND_TIMEOUT: float = float(os.getenv("RESEND_TIMEOUT", "5.0"))

    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "onboarding@resend.dev")
    NOTIFICATION_EMAIL: str = os.getenv("NOTIFICATION_EMAIL", "")
    FALLBACK_RECIPIENT_EMAIL: str = os.getenv(
        "FALLBACK_RECIPIENT_EMAIL", "rajahealthcaraclinic@gmail.com"
    )

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def email_config(self) -> EmailConfig:
        return EmailConfig(
            api_key=self.RESEND_API_KEY or None,
            sender=self.EMAIL_FROM,
            fallback_recipient=self.FALLBACK_RECIPIENT_EMAIL,
            recipient_override=self.NOTIFICATION_EMAIL or None,
        )


settings = Settings()
