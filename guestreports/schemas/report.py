# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report form schemas.

One form serves both create and edit. On edit it is seeded with the existing
report and the submitted fields are merged over that report, so fields the
form does not carry (id, status, creation time, updates) are preserved.
"""

import datetime
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from guestreports.models.enums import ReportStatus
from guestreports.models.report import Report

REQUIRED_MESSAGE = "Este campo es obligatorio"
ROOM_NUMBER_MESSAGE = "El número de habitación debe ser numérico"
DATE_MESSAGE = "Fecha inválida"


class ReportDraft(BaseModel):
    """User-entered report fields.

    ``status`` is accepted for convenience but never sent on create: new
    reports always start as ``abierto``.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    guest_name: str = Field(..., min_length=1)
    room_number: str = Field(..., min_length=1)
    reservation_number: str = ""
    agency: str = ""
    reported_by: str = ""
    department: str = ""
    arrival_date: datetime.date
    departure_date: datetime.date
    guest_mood: str = ""
    incident_report: str = Field(..., min_length=1)
    status: ReportStatus | None = None

    @field_validator("room_number")
    @classmethod
    def validate_room_number(cls, v: str) -> str:
        """Room numbers are plain digits; anything else is rejected."""
        if not (v.isascii() and v.isdigit()):
            raise ValueError("room_number must be numeric")
        return v


@dataclass(frozen=True)
class FormField:
    """One input of the report form."""

    name: str
    label: str
    kind: str = "text"
    required: bool = False


FORM_FIELDS: tuple[FormField, ...] = (
    FormField("guest_name", "Nombre del huésped", required=True),
    FormField("room_number", "Número de habitación", kind="number", required=True),
    FormField("reservation_number", "Número de reserva"),
    FormField("agency", "Agencia"),
    FormField("reported_by", "Reportado por"),
    FormField("department", "Departamento"),
    FormField("arrival_date", "Fecha de llegada", kind="date", required=True),
    FormField("departure_date", "Fecha de salida", kind="date", required=True),
    FormField("guest_mood", "Estado de ánimo del huésped"),
    FormField("incident_report", "Reporte de hechos", kind="textarea", required=True),
)

FIELD_NAMES = tuple(f.name for f in FORM_FIELDS)


class FormError(Exception):
    """Submitted form values failed validation."""

    def __init__(self, errors: dict[str, str], values: dict[str, str]):
        self.errors = errors
        self.values = values
        super().__init__(", ".join(f"{k}: {v}" for k, v in errors.items()))


def _message_for(error: dict[str, Any]) -> str:
    field = error["loc"][0] if error["loc"] else ""
    if error["type"] in ("missing", "string_too_short"):
        return REQUIRED_MESSAGE
    if field == "room_number":
        return ROOM_NUMBER_MESSAGE
    if field in ("arrival_date", "departure_date"):
        return DATE_MESSAGE
    return error["msg"]


class ReportForm:
    """Create/edit form state: initial report, submitted values, field errors."""

    def __init__(
        self,
        initial: Report | None = None,
        values: Mapping[str, str] | None = None,
        errors: Mapping[str, str] | None = None,
    ) -> None:
        self.initial = initial
        self.values = dict(values or {})
        self.errors = dict(errors or {})

    @property
    def is_edit(self) -> bool:
        return self.initial is not None

    @property
    def fields(self) -> tuple[FormField, ...]:
        return FORM_FIELDS

    def value(self, name: str) -> str:
        """Current text of a field: submitted value, else initial, else empty."""
        if name in self.values:
            return self.values[name]
        if self.initial is not None:
            v = getattr(self.initial, name)
            return v.isoformat() if isinstance(v, datetime.date) else str(v)
        return ""

    @staticmethod
    def parse(data: Mapping[str, Any]) -> ReportDraft:
        """Validate submitted form data into a draft.

        Empty strings count as missing for required fields.

        Raises:
            FormError: with one message per invalid field.
        """
        values = {name: str(data.get(name, "") or "") for name in FIELD_NAMES}
        cleaned: dict[str, Any] = {k: v for k, v in values.items() if v.strip()}
        if data.get("status"):
            cleaned["status"] = data["status"]
        try:
            return ReportDraft.model_validate(cleaned)
        except ValidationError as e:
            errors: dict[str, str] = {}
            for err in e.errors():
                field = str(err["loc"][0]) if err["loc"] else "__all__"
                errors.setdefault(field, _message_for(err))
            raise FormError(errors, values) from e

    @staticmethod
    def apply(draft: ReportDraft, report: Report) -> Report:
        """Merge an edit over the existing record."""
        changes = draft.model_dump(include=set(FIELD_NAMES))
        return report.model_copy(update=changes)
