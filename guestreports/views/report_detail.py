# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Report detail pane."""

from guestreports.models.enums import ReportStatus
from guestreports.services.report_service import ReportDetail
from guestreports.views.common import (
    DIALOG_CONFIRM,
    DIALOG_EDIT,
    PageState,
    esc,
    format_date,
    format_datetime,
)

PLACEHOLDER = "Selecciona un reporte para ver los detalles"
NO_UPDATES = "No hay actualizaciones"


def render_detail_placeholder() -> str:
    return f'<div class="panel placeholder">{esc(PLACEHOLDER)}</div>'


def _field(label: str, value: str) -> str:
    return f"<p><strong>{esc(label)}:</strong> {esc(value)}</p>"


def _status_form(detail: ReportDetail, state: PageState) -> str:
    options = "".join(
        f'<option value="{esc(s.value)}"{" selected" if s == detail.report.status else ""}>'
        f"{esc(s.label)}</option>"
        for s in ReportStatus
    )
    return (
        f'<form method="post" action="/reports/{esc(detail.report.id)}/status" class="status-form">'
        f"{state.hidden_fields()}"
        f'<select name="status" onchange="this.form.submit()">{options}</select>'
        '<noscript><button type="submit" class="btn">Cambiar</button></noscript>'
        "</form>"
    )


def _updates(detail: ReportDetail, state: PageState) -> str:
    latest = detail.latest_update
    if latest is None:
        latest_html = f'<div class="update"><p>{esc(NO_UPDATES)}</p></div>'
    else:
        latest_html = (
            f'<div class="update latest"><p>{esc(latest.text)}</p>'
            f'<p class="muted">{esc(format_datetime(latest.timestamp))}</p></div>'
        )

    toggle = ""
    if detail.has_more_updates:
        label = "Ocultar actualizaciones" if detail.show_all_updates else "Ver todas las actualizaciones"
        href = state.url(show_all=not detail.show_all_updates, dialog=None, update_id=None, error=None)
        toggle = f'<a class="toggle-updates" href="{esc(href)}">{label}</a>'

    older = "".join(
        f'<li class="update" data-update-id="{esc(u.id)}"><div><p>{esc(u.text)}</p>'
        f'<p class="muted">{esc(format_datetime(u.timestamp))}</p></div>'
        f'<a class="delete-update" href="{esc(state.url(dialog=DIALOG_CONFIRM, update_id=u.id, error=None))}"'
        ' aria-label="Eliminar actualización">&times;</a></li>'
        for u in detail.shown_older_updates
    )
    older_html = f'<ul class="updates">{older}</ul>' if older else ""
    return (
        "<section><h3>Última actualización:</h3>"
        f"{latest_html}{toggle}{older_html}</section>"
    )


def _new_update_form(detail: ReportDetail, state: PageState) -> str:
    return (
        f'<form method="post" action="/reports/{esc(detail.report.id)}/updates" class="update-form">'
        f"{state.hidden_fields()}"
        '<textarea name="text" placeholder="Nueva actualización" rows="3"></textarea>'
        '<button type="submit" class="btn btn-primary">Añadir actualización</button>'
        "</form>"
    )


def render_report_detail(detail: ReportDetail, state: PageState) -> str:
    """Full fields, status selector, update feed and actions for one report."""
    report = detail.report
    fields = "".join(
        [
            _field("Habitación", report.room_number),
            _field("Reserva", report.reservation_number),
            _field("Agencia", report.agency),
            _field("Reportado por", report.reported_by),
            _field("Departamento", report.department),
            _field("Llegada", format_date(report.arrival_date)),
            _field("Salida", format_date(report.departure_date)),
            _field("Estado de ánimo", report.guest_mood),
            _field("Creado el", format_datetime(report.created_at)),
        ]
    )
    edit_href = state.url(dialog=DIALOG_EDIT, update_id=None, error=None)
    delete_href = state.url(dialog=DIALOG_CONFIRM, update_id=None, error=None)
    return (
        f'<div class="panel detail" data-report-id="{esc(report.id)}">'
        f"<h2>{esc(report.guest_name)}</h2>"
        f'<div class="grid">{fields}</div>'
        f'<section><h3>Reporte de hechos:</h3><p class="incident">{esc(report.incident_report)}</p></section>'
        f"<section><h3>Estado del ticket:</h3>{_status_form(detail, state)}</section>"
        f"{_updates(detail, state)}"
        f"{_new_update_form(detail, state)}"
        '<div class="actions">'
        f'<a class="btn btn-warning" href="{esc(edit_href)}">Editar</a>'
        f'<a class="btn btn-danger" href="{esc(delete_href)}">Eliminar</a>'
        "</div></div>"
    )
