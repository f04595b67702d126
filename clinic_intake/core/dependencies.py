# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from fastapi import Depends

from clinic_intake.core.config import EmailConfig, settings
from clinic_intake.services.email_provider import EmailProvider, ResendProvider
from clinic_intake.services.intake_service import IntakeService
from clinic_intake.services.notifier import EmailNotifier

_email_config = settings.email_config()
_provider = ResendProvider(
    api_key=_email_config.api_key,
    base_url=settings.RESEND_API_URL,
    timeout=settings.RESEND_TIMEOUT,
)


def get_email_config() -> EmailConfig:
    return _email_config


def get_email_provider() -> EmailProvider:
    return _provider


def get_notifier(config: EmailConfig = Depends(get_email_config),
                 provider: EmailProvider = Depends(get_email_provider)) -> EmailNotifier:
    return EmailNotifier(config, provider)


def get_intake_service(notifier: EmailNotifier = Depends(get_notifier)) -> IntakeService:
    return IntakeService(notifier)
