"""Services package."""
from guestreports.services import filtering, report_service

__all__ = [
    "filtering",
    "report_service",
]
