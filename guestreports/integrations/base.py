# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Base classes for report store clients."""
from abc import ABC, abstractmethod

from guestreports.models.report import Report
from guestreports.schemas.report import ReportDraft


class ReportStoreError(Exception):
    """Base exception for report store errors."""


class StoreUnavailableError(ReportStoreError):
    """The store could not be reached."""


class StoreResponseError(ReportStoreError):
    """The store answered with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class StoreDataError(ReportStoreError):
    """The store answered with an unexpected payload."""


class ReportStore(ABC):
    """Interface to the service that owns report and update data."""

    @abstractmethod
    async def health_check(self) -> tuple[bool, str]:
        """Check connectivity. Returns (success, message)."""
        ...

    @abstractmethod
    async def list_reports(self) -> list[Report]:
        """All reports, without their updates."""
        ...

    @abstractmethod
    async def get_report(self, report_id: str) -> Report:
        """One report including its updates, newest first."""
        ...

    @abstractmethod
    async def create_report(self, draft: ReportDraft) -> None:
        """Create a report; status is always sent as open."""
        ...

    @abstractmethod
    async def update_report(self, report_id: str, report: Report) -> None:
        """Replace all mutable fields of a report."""
        ...

    @abstractmethod
    async def delete_report(self, report_id: str) -> None:
        """Delete a report."""
        ...

    @abstractmethod
    async def add_update(self, report_id: str, text: str) -> None:
        """Append an update to a report."""
        ...

    @abstractmethod
    async def delete_update(self, report_id: str, update_id: str) -> None:
        """Delete one update of a report."""
        ...

    async def close(self) -> None:
        """Clean up resources."""
        pass
