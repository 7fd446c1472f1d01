# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from guestreports.api.v1 import reports

api_router = APIRouter()

# Report routes (read-only JSON)
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
