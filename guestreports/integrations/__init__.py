# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report store integrations package."""
from guestreports.integrations.base import (
    ReportStore,
    ReportStoreError,
    StoreDataError,
    StoreResponseError,
    StoreUnavailableError,
)
from guestreports.integrations.rest_store import RestReportStore

__all__ = [
    "ReportStore",
    "ReportStoreError",
    "RestReportStore",
    "StoreDataError",
    "StoreResponseError",
    "StoreUnavailableError",
]
