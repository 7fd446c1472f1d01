# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report list pane."""

from guestreports.models.report import Report
from guestreports.views.common import PageState, esc, format_datetime

EMPTY_MESSAGE = "No hay reportes para mostrar en esta categoría."


def render_report_card(report: Report, state: PageState) -> str:
    """Selectable summary card for one report."""
    selected = " selected" if report.id == state.selected else ""
    href = state.url(selected=report.id, show_all=False, dialog=None, update_id=None, error=None)
    return (
        f'<a class="card{selected}" href="{esc(href)}" data-report-id="{esc(report.id)}">'
        f'<div class="card-head"><strong>{esc(report.guest_name)}</strong>'
        f'<span class="badge status-{esc(report.status.name.lower())}">'
        f"{esc(report.status.label)}</span></div>"
        f"<p>Habitación {esc(report.room_number)}"
        f'{" · " + esc(report.agency) if report.agency else ""}</p>'
        f'<p class="muted">{esc(format_datetime(report.created_at))}</p>'
        "</a>"
    )


def render_report_list(reports: list[Report], state: PageState) -> str:
    if not reports:
        return f'<p class="empty">{esc(EMPTY_MESSAGE)}</p>'
    return "".join(render_report_card(r, state) for r in reports)
