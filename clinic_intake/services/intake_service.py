# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic: validate → present → notify for each web form."""
from typing import Any, Callable

from clinic_intake.core.errors import IntakeError, InternalError
from clinic_intake.core.logging import get_logger
from clinic_intake.metrics import EMAIL_DELIVERY, SUBMISSIONS
from clinic_intake.schemas import (
    AppointmentRequest, ContactRequest, Notification, Submission,
)
from clinic_intake.services.notifier import EmailNotifier
from clinic_intake.services.presenter import render_appointment, render_contact
from clinic_intake.services.validator import validate_submission

logger = get_logger(__name__)


class IntakeService:
    def __init__(self, notifier: EmailNotifier):
        self._notifier = notifier

    async def submit_appointment(self, raw: Any) -> str:
        return await self._process(AppointmentRequest, render_appointment, raw)

    async def submit_contact(self, raw: Any) -> str:
        return await self._process(ContactRequest, render_contact, raw)

    async def _process(self, schema: type[Submission],
                       render: Callable[[Any], Notification], raw: Any) -> str:
        form = schema.FORM
        try:
            record = validate_submission(schema, raw)
            notification = render(record)
            with EMAIL_DELIVERY.labels(form=form).time():
                message_id = await self._notifier.send(notification)
        except IntakeError as exc:
            self._record_failure(form, exc)
            logger.warning("Submission failed: %s details=%s", exc.message, exc.details,
                           extra={"form": form, "kind": exc.kind})
            raise
        except Exception as exc:
            failure = InternalError()
            self._record_failure(form, failure)
            logger.exception("Submission failed unexpectedly",
                             extra={"form": form, "kind": failure.kind})
            raise failure from exc

        SUBMISSIONS.labels(form=form, outcome="sent").inc()
        logger.info("Email sent", extra={"form": form, "message_id": message_id})
        return message_id

    @staticmethod
    def _record_failure(form: str, exc: IntakeError) -> None:
        SUBMISSIONS.labels(form=form, outcome=exc.kind).inc()
