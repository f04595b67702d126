# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Deliver a rendered Notification to the clinic inbox."""

from clinic_intake.core.config import EmailConfig
from clinic_intake.core.errors import ConfigurationError, DeliveryError, ProviderError
from clinic_intake.core.logging import get_logger
from clinic_intake.schemas import Notification
from clinic_intake.services.email_provider import EmailProvider

logger = get_logger(__name__)


class EmailNotifier:
    def __init__(self, config: EmailConfig, provider: EmailProvider):
        self._config = config
        self._provider = provider

    @property
    def recipient(self) -> str:
        return self._config.recipient

    async def send(self, notification: Notification) -> str:
        """Send once. Returns the provider message id.

        Raises ConfigurationError without touching the provider when no
        API key is set, and DeliveryError when the provider refuses.
        """
        if not self._config.configured:
            raise ConfigurationError()

        to = self.recipient
        logger.info("Sending email from=%s to=%s subject=%r",
                    self._config.sender, to, notification.subject)
        try:
            return await self._provider.send(
                notification.subject,
                notification.html,
                to,
                sender=self._config.sender,
                text=notification.text,
                reply_to=notification.reply_to,
            )
        except ProviderError as exc:
            raise DeliveryError(details=exc.payload) from exc
