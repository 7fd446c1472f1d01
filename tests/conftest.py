# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import datetime
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["GUESTREPORTS_STORE_URL"] = "http://store.test/api"

from guestreports.api.deps import get_store
from guestreports.integrations.base import ReportStore, StoreResponseError, StoreUnavailableError
from guestreports.main import create_app
from guestreports.models.enums import ReportStatus
from guestreports.models.report import Report, UpdateEntry, newest_first
from guestreports.schemas.report import ReportDraft

STORE_URL = "http://store.test/api"
BASE_TIME = datetime.datetime(2024, 3, 5, 14, 30)


class FakeReportStore(ReportStore):
    """In-memory store with the same id and timestamp ownership as the real one."""

    def __init__(self, reports: list[Report] | None = None) -> None:
        self.reports: dict[str, Report] = {r.id: r for r in reports or []}
        self.calls: list[tuple] = []
        self.failing: set[str] = set()
        self._next_id = 100
        self._clock = BASE_TIME

    def _tick(self) -> datetime.datetime:
        self._clock += datetime.timedelta(minutes=1)
        return self._clock

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.failing:
            raise StoreUnavailableError(f"{name} failed: connection refused")

    def _require(self, report_id: str) -> Report:
        if report_id not in self.reports:
            raise StoreResponseError(404, "Reporte no encontrado")
        return self.reports[report_id]

    def call_names(self) -> list[str]:
        return [c[0] for c in self.calls]

    async def health_check(self) -> tuple[bool, str]:
        if "health_check" in self.failing:
            return False, "Connection failed"
        return True, "Connected"

    async def list_reports(self) -> list[Report]:
        self._record("list_reports")
        return [r.model_copy(update={"updates": []}) for r in self.reports.values()]

    async def get_report(self, report_id: str) -> Report:
        self._record("get_report", report_id)
        report = self._require(report_id)
        return report.model_copy(update={"updates": newest_first(report.updates)})

    async def create_report(self, draft: ReportDraft) -> None:
        self._record("create_report", draft)
        self._next_id += 1
        report_id = str(self._next_id)
        self.reports[report_id] = Report(
            id=report_id,
            created_at=self._tick(),
            **draft.model_dump(exclude={"status"}),
            status=ReportStatus.OPEN,
        )

    async def update_report(self, report_id: str, report: Report) -> None:
        self._record("update_report", report_id, report)
        existing = self._require(report_id)
        self.reports[report_id] = report.model_copy(
            update={"id": report_id, "created_at": existing.created_at, "updates": existing.updates}
        )

    async def delete_report(self, report_id: str) -> None:
        self._record("delete_report", report_id)
        self._require(report_id)
        del self.reports[report_id]

    async def add_update(self, report_id: str, text: str) -> None:
        self._record("add_update", report_id, text)
        report = self._require(report_id)
        self._next_id += 1
        entry = UpdateEntry(id=str(self._next_id), text=text, timestamp=self._tick())
        report.updates.append(entry)

    async def delete_update(self, report_id: str, update_id: str) -> None:
        self._record("delete_update", report_id, update_id)
        report = self._require(report_id)
        report.updates = [u for u in report.updates if u.id != update_id]


def make_report(**overrides) -> Report:
    data = {
        "id": "1",
        "guest_name": "Ana",
        "room_number": "101",
        "agency": "X",
        "department": "Recepción",
        "reservation_number": "F-1",
        "reported_by": "Luis",
        "arrival_date": datetime.date(2024, 3, 1),
        "departure_date": datetime.date(2024, 3, 8),
        "status": ReportStatus.OPEN,
        "guest_mood": "molesto",
        "incident_report": "Aire acondicionado averiado",
        "created_at": BASE_TIME,
    }
    data.update(overrides)
    return Report(**data)


def make_update(update_id: str, text: str, minutes: int) -> UpdateEntry:
    return UpdateEntry(
        id=update_id,
        text=text,
        timestamp=BASE_TIME + datetime.timedelta(minutes=minutes),
    )


@pytest.fixture
def sample_reports() -> list[Report]:
    return [
        make_report(),
        make_report(
            id="2",
            guest_name="Beto",
            room_number="202",
            agency="Y",
            status=ReportStatus.CLOSED,
        ),
        make_report(
            id="3",
            guest_name="Carla Anaya",
            room_number="303",
            agency="Viajes Sol",
            status=ReportStatus.IN_PROGRESS,
        ),
    ]


@pytest.fixture
def store(sample_reports) -> FakeReportStore:
    return FakeReportStore(sample_reports)


@pytest.fixture
def client(store):
    """Test client whose pages talk to the in-memory store."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
