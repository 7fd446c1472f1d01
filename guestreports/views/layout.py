# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Two-pane page layout."""

from guestreports.models.enums import StatusTab
from guestreports.services.report_service import ReportBoard, ReportDetail
from guestreports.views.common import DIALOG_NEW, PageState, esc
from guestreports.views.report_detail import render_detail_placeholder, render_report_detail
from guestreports.views.report_list import render_report_list

STYLE = """
body { background: #111827; color: #f3f4f6; font-family: sans-serif; margin: 0; padding: 2rem; }
a { color: inherit; }
h1 { text-align: center; }
.toolbar { display: flex; justify-content: space-between; gap: 1rem; margin-bottom: 1.5rem; }
.tabs a { padding: .5rem 1rem; background: #374151; border-radius: .5rem .5rem 0 0; text-decoration: none; }
.tabs a.active { background: #2563eb; }
.panes { display: flex; gap: 1.5rem; }
.list { width: 33%; max-height: calc(100vh - 200px); overflow-y: auto; }
.detail-pane { width: 67%; }
.card { display: block; background: #1f2937; padding: 1rem; margin-bottom: 1rem; border-radius: .5rem; text-decoration: none; }
.card.selected { outline: 2px solid #2563eb; }
.card-head { display: flex; justify-content: space-between; }
.panel { background: #1f2937; padding: 1.5rem; border-radius: .5rem; }
.placeholder, .empty { text-align: center; color: #9ca3af; }
.grid { display: grid; grid-template-columns: 1fr 1fr; gap: 1rem; }
.update, .incident { background: #374151; padding: .75rem; border-radius: .25rem; }
.updates { list-style: none; padding: 0; }
.muted { color: #9ca3af; font-size: .75rem; }
.error-banner { background: #7f1d1d; padding: .75rem; border-radius: .25rem; margin-bottom: 1rem; }
.btn { padding: .5rem 1rem; border: 0; border-radius: .25rem; background: #4b5563; color: #fff; text-decoration: none; }
.btn-primary { background: #2563eb; } .btn-danger { background: #dc2626; } .btn-warning { background: #ca8a04; }
.modal-backdrop { position: fixed; inset: 0; background: rgba(0,0,0,.6); display: flex; align-items: center; justify-content: center; }
.modal { background: #1f2937; padding: 1.5rem; border-radius: .5rem; max-height: 90vh; overflow-y: auto; position: relative; }
.modal-close { position: absolute; top: .5rem; right: .75rem; text-decoration: none; }
.field { display: flex; flex-direction: column; margin-bottom: .75rem; }
.field-error { color: #f87171; font-size: .875rem; }
"""


def render_tabs(board: ReportBoard, state: PageState) -> str:
    counts = board.tab_counts
    links = "".join(
        f'<a class="{"active" if tab == board.tab else ""}" '
        f'href="{esc(state.url(tab=tab, dialog=None, update_id=None, error=None))}">'
        f"{esc(tab.label)} ({counts[tab]})</a>"
        for tab in StatusTab
    )
    return f'<nav class="tabs">{links}</nav>'


def render_search(state: PageState) -> str:
    tab = "" if state.tab == StatusTab.ALL else (
        f'<input type="hidden" name="tab" value="{esc(state.tab.value)}">'
    )
    selected = "" if state.selected is None else (
        f'<input type="hidden" name="selected" value="{esc(state.selected)}">'
    )
    return (
        '<form method="get" action="/" class="search">'
        f"{tab}{selected}"
        f'<input type="search" name="q" value="{esc(state.q)}" '
        'placeholder="Buscar por habitación, huésped o agencia">'
        "</form>"
    )


def render_page(
    title: str,
    board: ReportBoard,
    detail: ReportDetail | None,
    state: PageState,
    dialog: str = "",
) -> str:
    """Whole document: header, tabs, search, list pane, detail pane, dialog."""
    error = state.error or board.last_error
    banner = f'<div class="error-banner" role="alert">{esc(error)}</div>' if error else ""
    detail_html = render_report_detail(detail, state) if detail else render_detail_placeholder()
    new_href = state.url(dialog=DIALOG_NEW, update_id=None, error=None)
    return (
        "<!DOCTYPE html>"
        '<html lang="es"><head><meta charset="utf-8">'
        f"<title>{esc(title)}</title><style>{STYLE}</style></head><body>"
        f"<h1>{esc(title)}</h1>{banner}"
        '<div class="toolbar">'
        f"{render_tabs(board, state)}"
        f'<div class="toolbar-right">{render_search(state)}'
        f'<a class="btn btn-primary" href="{esc(new_href)}">Nuevo Reporte</a></div>'
        "</div>"
        '<div class="panes">'
        f'<div class="list">{render_report_list(board.visible_reports, state)}</div>'
        f'<div class="detail-pane">{detail_html}</div>'
        "</div>"
        f"{dialog}</body></html>"
    )
