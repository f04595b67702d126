# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Classified failures of the intake pipeline.
Each carries the HTTP status and the public message it is reported with.
"""

from typing import Any, Optional


class IntakeError(Exception):
    """Base class for every failure the API reports in its JSON envelope."""

    status_code: int = 500
    message: str = "Internal Error"
    kind: str = "internal"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Any = None,
        headers: Optional[dict[str, str]] = None,
    ):
        self.message = message or self.message
        self.details = details
        self.headers = headers
        super().__init__(self.message)


class ValidationError(IntakeError):
    """Submission violates its schema. `details` lists every bad field."""

    status_code = 400
    message = "Invalid submission"
    kind = "validation"

    def __init__(self, errors: list[dict[str, str]], message: Optional[str] = None):
        super().__init__(message, details=errors)

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.details


class ConfigurationError(IntakeError):
    """Provider credential missing; needs operator action."""

    status_code = 500
    message = "Email service not configured"
    kind = "configuration"


class DeliveryError(IntakeError):
    """Provider rejected or failed the send. `details` is its diagnostic payload."""

    status_code = 500
    message = "Failed to send email"
    kind = "delivery"


class UnsupportedMethodError(IntakeError):
    status_code = 405
    message = "Method Not Allowed"
    kind = "method"

    def __init__(self, allow: str = "POST"):
        super().__init__(headers={"Allow": allow})
        self.allow = allow


class MalformedBodyError(IntakeError):
    """Request body is not decodable JSON."""

    status_code = 500
    message = "Malformed JSON body"
    kind = "malformed"


class InternalError(IntakeError):
    """Anything unexpected inside the pipeline; never exposes the cause."""

    status_code = 500
    message = "Internal Error"
    kind = "internal"


class ProviderError(Exception):
    """Raised by an EmailProvider; `payload` is the provider's error body."""

    def __init__(self, payload: dict[str, Any]):
        self.payload = payload
        super().__init__(payload.get("message") or payload.get("name") or "provider error")
