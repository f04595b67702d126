# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Web-form endpoints for appointment requests and contact inquiries.
Pure HTTP layer. The body is read raw and validated by the service so every
field error is reported in one response.
"""
from typing import Any

from fastapi import APIRouter, Depends, Request

from clinic_intake.core.dependencies import get_intake_service
from clinic_intake.core.errors import MalformedBodyError
from clinic_intake.core.logging import get_logger
from clinic_intake.schemas import ErrorResponse, SubmissionResponse
from clinic_intake.services.intake_service import IntakeService

logger = get_logger(__name__)

router = APIRouter(
    tags=["Intake"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid submission"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Email not configured or not delivered"},
    },
)


async def _read_json(request: Request) -> Any:
    # JSONDecodeError and UnicodeDecodeError are both ValueErrors
    try:
        return await request.json()
    except ValueError as exc:
        logger.error("Malformed JSON body on %s: %s", request.url.path, exc,
                     extra={"kind": MalformedBodyError.kind})
        raise MalformedBodyError() from exc


@router.post("/appointments", response_model=SubmissionResponse,
             response_model_exclude_none=True)
async def submit_appointment(request: Request,
                             service: IntakeService = Depends(get_intake_service)):
    """Forward an appointment request to the clinic inbox."""
    message_id = await service.submit_appointment(await _read_json(request))
    return SubmissionResponse(id=message_id)


@router.post("/contact", response_model=SubmissionResponse,
             response_model_exclude_none=True)
async def submit_contact(request: Request,
                         service: IntakeService = Depends(get_intake_service)):
    """Forward a contact-form inquiry to the clinic inbox."""
    message_id = await service.submit_contact(await _read_json(request))
    return SubmissionResponse(id=message_id)
