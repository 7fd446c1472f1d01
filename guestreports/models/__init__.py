# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain models package."""

from guestreports.models.enums import ReportStatus, StatusTab
from guestreports.models.report import Report, UpdateEntry, newest_first

__all__ = [
    "Report",
    "ReportStatus",
    "StatusTab",
    "UpdateEntry",
    "newest_first",
]
