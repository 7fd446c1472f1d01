# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""REST report store client."""
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from guestreports.integrations.base import (
    ReportStore,
    StoreDataError,
    StoreResponseError,
    StoreUnavailableError,
)
from guestreports.models.enums import ReportStatus
from guestreports.models.report import Report
from guestreports.schemas.report import ReportDraft
from guestreports.schemas.store import StoreReport, StoreReportPayload

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    """Escape an id for use as one URL path segment."""
    return quote(value, safe="")


def _error_detail(resp: httpx.Response) -> str:
    """Best-effort error text from a failed store response."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(data, dict):
        for key in ("error", "message", "detail"):
            if key in data:
                return str(data[key])
    return str(data)


class RestReportStore(ReportStore):
    """Client for the report store's ``/reports`` REST API."""

    def __init__(self, base_url: str, timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise StoreUnavailableError(f"{method} {url} failed: {e}") from e
        if resp.is_error:
            raise StoreResponseError(resp.status_code, _error_detail(resp))
        return resp

    async def health_check(self) -> tuple[bool, str]:
        """Check connectivity to the store."""
        try:
            resp = await self._client.get("/reports")
            if resp.status_code == 200:
                return True, "Connected"
            return False, f"HTTP {resp.status_code}"
        except httpx.ConnectError:
            return False, "Connection failed"
        except httpx.TimeoutException:
            return False, "Connection timeout"
        except httpx.HTTPError as e:
            return False, str(e)

    async def list_reports(self) -> list[Report]:
        """List all reports from the store."""
        resp = await self._request("GET", "/reports")
        try:
            data = resp.json()
            if not isinstance(data, list):
                raise StoreDataError(f"Expected a list of reports, got {type(data).__name__}")
            return [StoreReport.model_validate(item).to_report() for item in data]
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid report list from store: {e}")
            raise StoreDataError(f"Invalid report list: {e}") from e

    async def get_report(self, report_id: str) -> Report:
        """Get one report with its updates."""
        resp = await self._request("GET", f"/reports/{_segment(report_id)}")
        try:
            return StoreReport.model_validate(resp.json()).to_report(include_updates=True)
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid report {report_id} from store: {e}")
            raise StoreDataError(f"Invalid report {report_id}: {e}") from e

    async def create_report(self, draft: ReportDraft) -> None:
        """Create a report in the store with status open."""
        payload = StoreReportPayload.model_validate(
            draft.model_dump(exclude={"status"}) | {"status": ReportStatus.OPEN}
        )
        await self._request("POST", "/reports", json=payload.to_store_json())

    async def update_report(self, report_id: str, report: Report) -> None:
        """Send a full replacement of a report."""
        payload = StoreReportPayload.from_report(report)
        await self._request("PUT", f"/reports/{_segment(report_id)}", json=payload.to_store_json())

    async def delete_report(self, report_id: str) -> None:
        """Delete a report from the store."""
        await self._request("DELETE", f"/reports/{_segment(report_id)}")

    async def add_update(self, report_id: str, text: str) -> None:
        """Append an update to a report."""
        await self._request(
            "POST",
            f"/reports/{_segment(report_id)}/updates",
            json={"actualizacion": text},
        )

    async def delete_update(self, report_id: str, update_id: str) -> None:
        """Delete one update of a report."""
        await self._request("DELETE", f"/reports/{_segment(report_id)}/updates/{_segment(update_id)}")
