# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Presenter: turns a validated submission into a ready-to-send email.

Pure functions only. Every user-supplied value is HTML-escaped before it is
embedded, so submissions can never change the structure of the markup.
"""

import html
from datetime import date, datetime
from typing import Optional

from clinic_intake.schemas import (
    AppointmentRequest, ContactRequest, Notification, TimeSlot,
)

TIME_SLOT_LABELS: dict[TimeSlot, str] = {
    TimeSlot.MORNING: "Morning (9:00 AM - 12:00 PM)",
    TimeSlot.AFTERNOON: "Afternoon (12:00 PM - 3:00 PM)",
    TimeSlot.EVENING: "Evening (3:00 PM - 6:00 PM)",
}

SERVICE_LABELS: dict[str, str] = {
    "general": "General Medicine",
    "general-medicine": "General Medicine",
    "orthopedics": "Orthopedics & Joint Care",
    "physiotherapy": "Physiotherapy & Rehabilitation",
    "cardiology": "Cardiology",
    "pediatrics": "Pediatrics",
    "gynecology": "Obstetrics & Gynecology",
    "dermatology": "Dermatology",
    "ent": "Ear, Nose & Throat (ENT)",
    "dental": "Dental Care",
    "diagnostics": "Laboratory & Diagnostics",
    "emergency": "Emergency Care",
}


def time_slot_label(slot: TimeSlot) -> str:
    return TIME_SLOT_LABELS[TimeSlot(slot)]


def service_label(code: str) -> str:
    """Department name for a service code, or the code itself if unknown."""
    return SERVICE_LABELS.get(code.strip().lower(), code)


def _parse_date(value: str) -> Optional[date]:
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        # "Z" suffix is only accepted by fromisoformat on 3.11+
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_preferred_date(value: str) -> str:
    """Long form like "Monday, 1 January 2024"; unparseable input comes back as-is.

    The fallback is returned unescaped. The HTML body escapes it like any
    other submitted value, so only the plain-text body shows it byte for byte.
    """
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return f"{parsed:%A}, {parsed.day} {parsed:%B %Y}"


def _escape(value: str) -> str:
    return html.escape(value, quote=True).replace("\r\n", "\n").replace("\n", "<br>")


def _subject(text: str) -> str:
    # header values must stay on one line
    return " ".join(text.split())


def _render(title: str, rows: list[tuple[str, str]],
            sections: list[tuple[str, str]]) -> tuple[str, str]:
    html_parts = [f"<h2>{html.escape(title)}</h2>"]
    text_parts = [title, ""]
    for label, value in rows:
        html_parts.append(f"<p><strong>{label}:</strong> {_escape(value)}</p>")
        text_parts.append(f"{label}: {value}")
    for label, value in sections:
        html_parts.append(f"<p><strong>{label}:</strong></p>")
        html_parts.append(f"<p>{_escape(value)}</p>")
        text_parts.extend(["", f"{label}:", value])
    return "\n".join(html_parts), "\n".join(text_parts)


def render_appointment(record: AppointmentRequest) -> Notification:
    rows = [
        ("Name", record.full_name),
        ("Email", record.email),
        ("Phone", record.phone),
        ("Date", format_preferred_date(record.preferred_date)),
        ("Time", time_slot_label(record.preferred_time)),
        ("Service", service_label(record.service)),
    ]
    sections = []
    if record.reason:
        sections.append(("Reason", record.reason))
    body_html, body_text = _render("New Appointment Request", rows, sections)
    return Notification(
        subject=_subject(f"New Appointment: {record.full_name}"),
        html=body_html,
        text=body_text,
        reply_to=record.email,
    )


def render_contact(record: ContactRequest) -> Notification:
    rows = [
        ("Name", record.name),
        ("Email", record.email),
        ("Phone", record.phone),
        ("Subject", record.subject),
    ]
    body_html, body_text = _render(
        "New Contact Form Submission", rows, [("Message", record.message)],
    )
    return Notification(
        subject=_subject(f"Contact: {record.subject}"),
        html=body_html,
        text=body_text,
        reply_to=record.email,
    )
