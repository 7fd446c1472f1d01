# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for reports."""

from enum import Enum


class ReportStatus(str, Enum):
    """Report lifecycle status.

    Values are the store's wire values. Any status may follow any other:

        abierto <-> en proceso <-> cerrado
           ^__________________________^
    """

    OPEN = "abierto"
    IN_PROGRESS = "en proceso"
    CLOSED = "cerrado"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


class StatusTab(str, Enum):
    """Tabs of the report list; ALL disables the status filter."""

    ALL = "todos"
    OPEN = "abierto"
    IN_PROGRESS = "en proceso"
    CLOSED = "cerrado"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


STATUS_LABELS = {
    ReportStatus.OPEN: "Abierto",
    ReportStatus.IN_PROGRESS: "En proceso",
    ReportStatus.CLOSED: "Cerrado",
}

TAB_LABELS = {
    StatusTab.ALL: "Todos",
    StatusTab.OPEN: "Abiertos",
    StatusTab.IN_PROGRESS: "En Proceso",
    StatusTab.CLOSED: "Cerrados",
}
