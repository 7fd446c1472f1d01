# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-only JSON report endpoints in local field naming."""

from fastapi import APIRouter, Depends, HTTPException, status

from guestreports.api.deps import get_store
from guestreports.integrations.base import (
    ReportStore,
    ReportStoreError,
    StoreResponseError,
)
from guestreports.models.enums import StatusTab
from guestreports.models.report import Report
from guestreports.schemas.common import ReportListResponse
from guestreports.services.filtering import count_by_tab, filter_reports

router = APIRouter()


@router.get("", response_model=ReportListResponse)
async def list_reports(
    tab: StatusTab = StatusTab.ALL,
    q: str = "",
    store: ReportStore = Depends(get_store),
) -> ReportListResponse:
    """List reports passing the tab and search filters."""
    try:
        reports = await store.list_reports()
    except ReportStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Report store unavailable: {e}",
        ) from e
    return ReportListResponse(
        data=filter_reports(reports, tab, q),
        counts=count_by_tab(reports),
    )


@router.get("/{report_id}", response_model=Report)
async def get_report(
    report_id: str,
    store: ReportStore = Depends(get_store),
) -> Report:
    """Get one report with its updates, newest first."""
    try:
        return await store.get_report(report_id)
    except StoreResponseError as e:
        if e.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Report not found",
            ) from e
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Report store error: {e}",
        ) from e
    except ReportStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Report store unavailable: {e}",
        ) from e
