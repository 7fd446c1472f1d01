# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report and update models in local field naming."""

import datetime

from pydantic import BaseModel, Field

from guestreports.models.enums import ReportStatus


class UpdateEntry(BaseModel):
    """A timestamped free-text note appended to a report."""

    id: str
    text: str
    timestamp: datetime.datetime


class Report(BaseModel):
    """A guest incident report.

    Identity, creation time and update identities are owned by the store.
    """

    id: str
    guest_name: str
    room_number: str
    agency: str = ""
    department: str = ""
    reservation_number: str = ""
    reported_by: str = ""
    arrival_date: datetime.date
    departure_date: datetime.date
    status: ReportStatus = ReportStatus.OPEN
    guest_mood: str = ""
    incident_report: str = ""
    created_at: datetime.datetime
    updates: list[UpdateEntry] = Field(default_factory=list)


def newest_first(updates: list[UpdateEntry]) -> list[UpdateEntry]:
    """Order updates most recent first; ties keep store order."""
    return sorted(updates, key=lambda u: u.timestamp, reverse=True)
