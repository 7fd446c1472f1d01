# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report board state and handlers.

The board keeps a full copy of the store's reports and re-fetches it after
every report mutation instead of patching it locally. Update mutations
re-fetch only the affected report's update list. Failed store calls are
logged, recorded in ``last_error`` and leave the in-memory state as it was.
"""

import logging

from guestreports.integrations.base import ReportStore, ReportStoreError
from guestreports.models.enums import ReportStatus, StatusTab
from guestreports.models.report import Report, UpdateEntry, newest_first
from guestreports.schemas.report import ReportDraft, ReportForm
from guestreports.services.filtering import count_by_tab, filter_reports

logger = logging.getLogger(__name__)

DELETE_REPORT_MESSAGE = "¿Estás seguro de que quieres eliminar este reporte?"
DELETE_UPDATE_MESSAGE = "¿Estás seguro de que quieres eliminar esta actualización?"
REPORT_GONE_MESSAGE = "El reporte ya no existe"


class ReportBoard:
    """In-memory report set, active filter and selection."""

    def __init__(
        self,
        store: ReportStore,
        tab: StatusTab = StatusTab.ALL,
        search: str = "",
        selected_id: str | None = None,
    ) -> None:
        self.store = store
        self.reports: list[Report] = []
        self.tab = tab
        self.search = search
        self.selected_id = selected_id
        self.last_error: str | None = None

    def record_error(self, action: str, message: str, exc: Exception) -> None:
        logger.error(f"Error {action}: {exc}")
        self.last_error = message

    def report_missing(self) -> None:
        """Flag a vanished report unless loading the list already failed."""
        if self.last_error is None:
            self.last_error = REPORT_GONE_MESSAGE

    # View state

    def select(self, report_id: str | None) -> None:
        self.selected_id = report_id

    def get(self, report_id: str) -> Report | None:
        return next((r for r in self.reports if r.id == report_id), None)

    @property
    def selected_report(self) -> Report | None:
        """The selected report, whether or not it passes the current filter."""
        if self.selected_id is None:
            return None
        return self.get(self.selected_id)

    @property
    def visible_reports(self) -> list[Report]:
        return filter_reports(self.reports, self.tab, self.search)

    @property
    def tab_counts(self) -> dict[StatusTab, int]:
        return count_by_tab(self.reports)

    # Store round trips

    async def refresh(self) -> bool:
        """Reload the full report list."""
        try:
            self.reports = await self.store.list_reports()
        except ReportStoreError as e:
            self.record_error("fetching reports", "No se pudieron cargar los reportes", e)
            return False
        return True

    async def create_report(self, draft: ReportDraft) -> bool:
        """Create a report (always open) and reload the list."""
        try:
            await self.store.create_report(draft)
        except ReportStoreError as e:
            self.record_error("creating report", "No se pudo crear el reporte", e)
            return False
        logger.info(f"Created report for room {draft.room_number}")
        await self.refresh()
        return True

    async def update_report(self, report_id: str, report: Report) -> bool:
        """Replace a report with a full record and reload the list."""
        try:
            await self.store.update_report(report_id, report)
        except ReportStoreError as e:
            self.record_error("updating report", "No se pudo actualizar el reporte", e)
            return False
        await self.refresh()
        return True

    async def change_status(self, report_id: str, status: ReportStatus) -> bool:
        """Resubmit the full record with only the status changed."""
        report = self.get(report_id)
        if report is None:
            logger.warning(f"Status change for unknown report {report_id}")
            self.report_missing()
            return False
        return await self.update_report(report_id, report.model_copy(update={"status": status}))

    async def edit_report(self, report_id: str, draft: ReportDraft) -> bool:
        """Merge edited form fields over the stored record and submit it."""
        report = self.get(report_id)
        if report is None:
            logger.warning(f"Edit for unknown report {report_id}")
            self.report_missing()
            return False
        return await self.update_report(report_id, ReportForm.apply(draft, report))

    async def delete_report(self, report_id: str) -> bool:
        """Delete a report, reload, and drop the selection if it was selected."""
        try:
            await self.store.delete_report(report_id)
        except ReportStoreError as e:
            self.record_error("deleting report", "No se pudo eliminar el reporte", e)
            return False
        logger.info(f"Deleted report {report_id}")
        await self.refresh()
        if self.selected_id == report_id:
            self.selected_id = None
        return True

    async def open_detail(self, show_all_updates: bool = False) -> "ReportDetail | None":
        """Detail state for the selected report, with its updates loaded."""
        report = self.selected_report
        if report is None:
            return None
        detail = ReportDetail(self, report, show_all_updates=show_all_updates)
        await detail.load_updates()
        return detail


class ReportDetail:
    """Detail pane state: the report's own update feed and delete confirmation."""

    def __init__(
        self,
        board: ReportBoard,
        report: Report,
        show_all_updates: bool = False,
    ) -> None:
        self.board = board
        self.report = report
        self.updates: list[UpdateEntry] = list(report.updates)
        self.show_all_updates = show_all_updates
        self.pending_update_id: str | None = None
        self.confirming = False

    async def load_updates(self) -> bool:
        """Fetch this report's updates, newest first."""
        try:
            fresh = await self.board.store.get_report(self.report.id)
        except ReportStoreError as e:
            self.board.record_error("fetching updates", "No se pudieron cargar las actualizaciones", e)
            return False
        self.updates = newest_first(fresh.updates)
        return True

    @property
    def latest_update(self) -> UpdateEntry | None:
        return self.updates[0] if self.updates else None

    @property
    def older_updates(self) -> list[UpdateEntry]:
        return self.updates[1:]

    @property
    def has_more_updates(self) -> bool:
        return len(self.updates) > 1

    @property
    def shown_older_updates(self) -> list[UpdateEntry]:
        return self.older_updates if self.show_all_updates else []

    async def change_status(self, status: ReportStatus) -> bool:
        ok = await self.board.change_status(self.report.id, status)
        if ok:
            self.report = self.board.get(self.report.id) or self.report
        return ok

    async def add_update(self, text: str) -> bool:
        """Append a non-blank update and reload the update list."""
        text = text.strip()
        if not text:
            logger.debug(f"Ignoring blank update for report {self.report.id}")
            return False
        try:
            await self.board.store.add_update(self.report.id, text)
        except ReportStoreError as e:
            self.board.record_error("adding update", "No se pudo añadir la actualización", e)
            return False
        await self.load_updates()
        return True

    async def delete_update(self, update_id: str) -> bool:
        try:
            await self.board.store.delete_update(self.report.id, update_id)
        except ReportStoreError as e:
            self.board.record_error("deleting update", "No se pudo eliminar la actualización", e)
            return False
        await self.load_updates()
        return True

    # Shared delete confirmation

    def request_delete_report(self) -> None:
        self.pending_update_id = None
        self.confirming = True

    def request_delete_update(self, update_id: str) -> None:
        self.pending_update_id = update_id
        self.confirming = True

    def cancel_delete(self) -> None:
        self.pending_update_id = None
        self.confirming = False

    @property
    def confirmation_message(self) -> str:
        if self.pending_update_id is not None:
            return DELETE_UPDATE_MESSAGE
        return DELETE_REPORT_MESSAGE

    async def confirm_delete(self) -> bool:
        """Delete the pending update if there is one, else the whole report."""
        update_id = self.pending_update_id
        self.cancel_delete()
        if update_id is not None:
            return await self.delete_update(update_id)
        return await self.board.delete_report(self.report.id)
