"""Pydantic schemas package."""
from guestreports.schemas.common import HealthResponse, ReportListResponse
from guestreports.schemas.report import (
    FORM_FIELDS,
    FormError,
    FormField,
    ReportDraft,
    ReportForm,
)
from guestreports.schemas.store import StoreReport, StoreReportPayload, StoreUpdate

__all__ = [
    "FORM_FIELDS",
    "FormError",
    "FormField",
    "HealthResponse",
    "ReportDraft",
    "ReportForm",
    "ReportListResponse",
    "StoreReport",
    "StoreReportPayload",
    "StoreUpdate",
]
