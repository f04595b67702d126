# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Email provider client, the only outbound network call.
Talks to the Resend REST API with httpx.
"""

from typing import Optional, Protocol

import httpx

from clinic_intake.core.errors import ProviderError
from clinic_intake.core.logging import get_logger

logger = get_logger(__name__)


class EmailProvider(Protocol):
    """Anything that can deliver one email and hand back its message id."""

    async def send(
        self,
        subject: str,
        html: str,
        to: str,
        *,
        sender: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> str:
        ...


class ResendProvider:
    """Resend transactional-email API. One attempt per call, no retries."""

    def __init__(self, api_key: Optional[str], base_url: str = "https://api.resend.com",
                 timeout: float = 5.0):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def send(self, subject, html, to, *, sender, text=None, reply_to=None) -> str:
        payload = {
            "from": sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text
        if reply_to:
            payload["reply_to"] = reply_to

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(
                    f"{self._base_url}/emails",
                    json=payload,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
        except httpx.HTTPError as exc:
            logger.error("Resend request failed: %s", exc)
            raise ProviderError({
                "name": "network_error",
                "message": str(exc) or type(exc).__name__,
            }) from exc

        if resp.status_code >= 300:
            raise ProviderError(_error_body(resp))

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            raise ProviderError({
                "statusCode": resp.status_code,
                "name": "invalid_response",
                "message": "Provider accepted the request but returned no JSON object",
            })
        message_id = body.get("id")
        logger.info("Resend accepted email to=%s id=%s", to, message_id)
        return message_id


def _error_body(resp: httpx.Response) -> dict:
    """Resend errors look like {"statusCode", "name", "message"}."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {"message": resp.text or resp.reason_phrase}
    body.setdefault("statusCode", resp.status_code)
    body.setdefault("name", "application_error")
    return body
