# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from pydantic import BaseModel

from guestreports.models.enums import StatusTab
from guestreports.models.report import Report


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    store: str


class ReportListResponse(BaseModel):
    """Filtered reports plus per-tab totals of the unfiltered set."""

    data: list[Report]
    counts: dict[StatusTab, int]
