# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Store wire schemas.

The report store speaks Spanish field names. Each schema here declares the
local attribute with the store name as its alias, so reading uses
``model_validate(store_json)`` and writing uses
``model_dump(mode="json", by_alias=True)``.

    local               store
    ------------------  --------------------
    id                  id
    guest_name          nombre
    room_number         numero_habitacion
    agency              agencia
    department          departamento
    reservation_number  folio
    reported_by         reportadopor
    arrival_date        fecha_entrada
    departure_date      fecha_salida
    status              estado_oportunidad
    guest_mood          estado_animo
    incident_report     descripcion_reporte
    created_at          fecha_creacion
    (update) text       actualizacion
    (update) timestamp  fecha_actualizacion
"""

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from guestreports.models.enums import ReportStatus
from guestreports.models.report import Report, UpdateEntry, newest_first

TEXT_FIELDS = (
    "guest_name",
    "agency",
    "department",
    "reservation_number",
    "reported_by",
    "guest_mood",
    "incident_report",
)

# Local fields sent on create and full replacement.
PAYLOAD_FIELDS = frozenset(
    {
        *TEXT_FIELDS,
        "room_number",
        "arrival_date",
        "departure_date",
        "status",
    }
)


def _stringify(v: Any) -> Any:
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


class StoreUpdate(BaseModel):
    """Update record as returned inside ``GET /reports/{id}``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    text: str = Field(default="", alias="actualizacion")
    timestamp: datetime.datetime = Field(alias="fecha_actualizacion")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _stringify(v)

    @field_validator("text", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def to_entry(self) -> UpdateEntry:
        return UpdateEntry(id=self.id, text=self.text, timestamp=self.timestamp)


class StoreReportPayload(BaseModel):
    """Body of ``POST /reports`` and ``PUT /reports/{id}``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    guest_name: str = Field(default="", alias="nombre")
    room_number: str = Field(alias="numero_habitacion")
    agency: str = Field(default="", alias="agencia")
    department: str = Field(default="", alias="departamento")
    reservation_number: str = Field(default="", alias="folio")
    reported_by: str = Field(default="", alias="reportadopor")
    arrival_date: datetime.date = Field(alias="fecha_entrada")
    departure_date: datetime.date = Field(alias="fecha_salida")
    status: ReportStatus = Field(default=ReportStatus.OPEN, alias="estado_oportunidad")
    guest_mood: str = Field(default="", alias="estado_animo")
    incident_report: str = Field(default="", alias="descripcion_reporte")

    @field_validator("room_number", "reservation_number", mode="before")
    @classmethod
    def coerce_numeric_text(cls, v: Any) -> Any:
        return _stringify(v)

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("arrival_date", "departure_date", mode="before")
    @classmethod
    def date_part_only(cls, v: Any) -> Any:
        """Accept ``2024-03-01`` as well as ``2024-03-01T06:00:00.000Z``."""
        if isinstance(v, str) and len(v) > 10 and v[10] in "T ":
            return v[:10]
        return v

    @field_serializer("room_number", when_used="json")
    def room_number_as_int(self, v: str) -> int | str:
        """The store keeps room numbers as integers."""
        return int(v) if v.isascii() and v.isdigit() else v

    def to_store_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_report(cls, report: Report) -> "StoreReportPayload":
        """Full replacement body for an existing report."""
        return cls.model_validate(report.model_dump(include=PAYLOAD_FIELDS))


class StoreReport(StoreReportPayload):
    """Report record as returned by ``GET /reports`` and ``GET /reports/{id}``."""

    id: str
    created_at: datetime.datetime = Field(alias="fecha_creacion")
    updates: list[StoreUpdate] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return _stringify(v)

    @field_validator("updates", mode="before")
    @classmethod
    def none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_report(self, include_updates: bool = False) -> Report:
        """Translate to the local report model.

        List responses never carry updates; they are fetched per report.
        """
        updates = (
            newest_first([u.to_entry() for u in self.updates]) if include_updates else []
        )
        return Report(
            id=self.id,
            created_at=self.created_at,
            updates=updates,
            **self.model_dump(include=PAYLOAD_FIELDS),
        )
