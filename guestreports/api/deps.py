# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Request

from guestreports.config import Settings, get_settings
from guestreports.integrations.base import ReportStore


def get_store(request: Request) -> ReportStore:
    """Store client created by the application lifespan."""
    return request.app.state.store


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()
