# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Create/edit report form."""

from guestreports.schemas.report import FormField, ReportForm
from guestreports.views.common import PageState, esc


def _render_input(field: FormField, value: str) -> str:
    required = " required" if field.required else ""
    if field.kind == "textarea":
        return (
            f'<textarea id="{field.name}" name="{field.name}" rows="4"{required}>'
            f"{esc(value)}</textarea>"
        )
    # Digit check happens in ReportDraft.
    kind = "text" if field.kind == "number" else field.kind
    extra = ' inputmode="numeric" pattern="[0-9]+"' if field.kind == "number" else ""
    return (
        f'<input id="{field.name}" name="{field.name}" type="{kind}" '
        f'value="{esc(value)}"{extra}{required}>'
    )


def render_report_form(form: ReportForm, action: str, state: PageState) -> str:
    """The form for ``action``; edit mode is pre-filled from the initial report."""
    rows = []
    for field in form.fields:
        error = form.errors.get(field.name)
        error_html = f'<span class="field-error">{esc(error)}</span>' if error else ""
        rows.append(
            f'<div class="field{" has-error" if error else ""}">'
            f'<label for="{field.name}">{esc(field.label)}</label>'
            f"{_render_input(field, form.value(field.name))}{error_html}"
            "</div>"
        )
    submit = "Guardar cambios" if form.is_edit else "Crear reporte"
    return (
        f'<form method="post" action="{esc(action)}" class="report-form">'
        f"{state.hidden_fields()}{''.join(rows)}"
        f'<button type="submit" class="btn btn-primary">{submit}</button>'
        "</form>"
    )
