# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from enum import Enum
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TimeSlot(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class Submission(BaseModel):
    """Base for web-form payloads. JSON keys are camelCase."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    FORM: ClassVar[str] = "submission"


class AppointmentRequest(Submission):
    FORM: ClassVar[str] = "appointments"

    full_name: str = Field(..., alias="fullName", min_length=2, examples=["Jo Lee"])
    email: EmailStr = Field(..., examples=["jo@example.com"])
    phone: str = Field(..., min_length=10, examples=["9998887777"])
    preferred_date: str = Field(..., alias="preferredDate", min_length=1, examples=["2024-01-01"])
    preferred_time: TimeSlot = Field(..., alias="preferredTime", examples=["morning"])
    service: str = Field(..., min_length=1, examples=["orthopedics"])
    reason: Optional[str] = Field(default=None)


class ContactRequest(Submission):
    FORM: ClassVar[str] = "contact"

    name: str = Field(..., min_length=2, examples=["Jo Lee"])
    email: EmailStr = Field(..., examples=["jo@example.com"])
    phone: str = Field(..., min_length=10, examples=["9998887777"])
    subject: str = Field(..., min_length=3, examples=["Back pain"])
    message: str = Field(..., min_length=10)


class Notification(BaseModel):
    """Rendered email, ready for the notifier."""
    subject: str
    html: str
    text: str
    reply_to: Optional[str] = None


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str = "Sent successfully"
    id: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[Any] = None
