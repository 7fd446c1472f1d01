# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report list filtering by status tab and free-text search."""

from collections import Counter
from collections.abc import Iterable

from guestreports.models.enums import StatusTab
from guestreports.models.report import Report


def matches_tab(report: Report, tab: StatusTab) -> bool:
    return tab == StatusTab.ALL or report.status.value == tab.value


def matches_search(report: Report, search: str) -> bool:
    """Case-insensitive substring match on guest name, room number or agency."""
    needle = search.strip().casefold()
    if not needle:
        return True
    return any(
        needle in field.casefold()
        for field in (report.guest_name, report.room_number, report.agency)
    )


def filter_reports(
    reports: Iterable[Report],
    tab: StatusTab = StatusTab.ALL,
    search: str = "",
) -> list[Report]:
    """Reports passing both the tab and the search filter, in input order."""
    return [r for r in reports if matches_tab(r, tab) and matches_search(r, search)]


def count_by_tab(reports: Iterable[Report]) -> dict[StatusTab, int]:
    """Number of reports under each tab, ignoring the search text."""
    statuses = Counter(r.status.value for r in reports)
    return {
        tab: sum(statuses.values()) if tab == StatusTab.ALL else statuses[tab.value]
        for tab in StatusTab
    }
