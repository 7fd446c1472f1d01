# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HTML pages of the report desk.

GET ``/`` renders the whole two-pane page from the state in its query string.
Every POST performs one mutation through the report board and answers
303 See Other to the page URL describing the resulting state.
"""

from collections.abc import Mapping
from typing import Any

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from guestreports.api.deps import get_app_settings, get_store
from guestreports.config import Settings
from guestreports.integrations.base import ReportStore
from guestreports.models.enums import ReportStatus, StatusTab
from guestreports.schemas.report import FormError, ReportForm
from guestreports.services.report_service import ReportBoard, ReportDetail
from guestreports.views.common import (
    DIALOG_CONFIRM,
    DIALOG_EDIT,
    DIALOG_NEW,
    PageState,
    esc,
)
from guestreports.views.layout import render_page
from guestreports.views.modal import render_confirmation, render_modal
from guestreports.views.report_form import render_report_form

router = APIRouter()


def _state_from_form(data: Mapping[str, Any]) -> PageState:
    """Recover the list/detail state from the hidden inputs of a form."""
    try:
        tab = StatusTab(data.get("tab") or StatusTab.ALL.value)
    except ValueError:
        tab = StatusTab.ALL
    return PageState(
        tab=tab,
        q=str(data.get("q") or ""),
        selected=data.get("selected") or None,
        show_all=data.get("show_all") == "1",
    )


def _redirect(board: ReportBoard, state: PageState) -> RedirectResponse:
    url = state.url(
        selected=board.selected_id,
        dialog=None,
        update_id=None,
        error=board.last_error,
    )
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _render_dialog(
    state: PageState,
    detail: ReportDetail | None,
    form: ReportForm | None,
) -> str:
    close_href = state.url(dialog=None, update_id=None, error=None)
    if state.dialog == DIALOG_NEW:
        form = form or ReportForm()
        return render_modal(
            render_report_form(form, "/reports", state), close_href, title="Nuevo Reporte"
        )
    if detail is None:
        return ""
    if state.dialog == DIALOG_EDIT:
        form = form or ReportForm(initial=detail.report)
        return render_modal(
            render_report_form(form, f"/reports/{detail.report.id}", state),
            close_href,
            title="Editar Reporte",
        )
    if state.dialog == DIALOG_CONFIRM:
        hidden = state.hidden_fields()
        if state.update_id is not None:
            detail.request_delete_update(state.update_id)
            hidden += f'<input type="hidden" name="update_id" value="{esc(state.update_id)}">'
        else:
            detail.request_delete_report()
        return render_confirmation(
            detail.confirmation_message,
            f"/reports/{detail.report.id}/delete",
            close_href,
            hidden=hidden,
        )
    return ""


async def _render(
    board: ReportBoard,
    state: PageState,
    settings: Settings,
    form: ReportForm | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    detail = await board.open_detail(show_all_updates=state.show_all)
    dialog = _render_dialog(state, detail, form)
    html = render_page(settings.app_title, board, detail, state, dialog)
    return HTMLResponse(html, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def index(
    tab: StatusTab = StatusTab.ALL,
    q: str = "",
    selected: str | None = None,
    show_all: bool = False,
    dialog: str | None = None,
    update_id: str | None = None,
    error: str | None = None,
    store: ReportStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """Render the report desk."""
    state = PageState(
        tab=tab,
        q=q,
        selected=selected or None,
        show_all=show_all,
        dialog=dialog,
        update_id=update_id,
        error=error,
    )
    board = ReportBoard(store, tab=tab, search=q, selected_id=state.selected)
    await board.refresh()
    return await _render(board, state, settings)


@router.post("/reports", response_class=HTMLResponse, response_model=None)
async def create_report(
    request: Request,
    store: ReportStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse | RedirectResponse:
    """Create a report from the new-report form."""
    data = await request.form()
    state = _state_from_form(data)
    board = ReportBoard(store, tab=state.tab, search=state.q, selected_id=state.selected)
    try:
        draft = ReportForm.parse(data)
    except FormError as e:
        await board.refresh()
        form = ReportForm(values=e.values, errors=e.errors)
        return await _render(
            board,
            state.with_(dialog=DIALOG_NEW),
            settings,
            form=form,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    if not await board.create_report(draft):
        await board.refresh()
        form = ReportForm(values={k: str(v) for k, v in data.items()})
        return await _render(
            board,
            state.with_(dialog=DIALOG_NEW),
            settings,
            form=form,
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    return _redirect(board, state)


@router.post("/reports/{report_id}", response_class=HTMLResponse, response_model=None)
async def edit_report(
    report_id: str,
    request: Request,
    store: ReportStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse | RedirectResponse:
    """Save the edit form over the existing report."""
    data = await request.form()
    state = _state_from_form(data)
    board = ReportBoard(store, tab=state.tab, search=state.q, selected_id=state.selected)
    await board.refresh()
    try:
        draft = ReportForm.parse(data)
    except FormError as e:
        board.select(report_id)
        report = board.get(report_id)
        if report is None:
            board.report_missing()
        form = ReportForm(initial=report, values=e.values, errors=e.errors)
        return await _render(
            board,
            state.with_(selected=report_id, dialog=DIALOG_EDIT),
            settings,
            form=form,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    await board.edit_report(report_id, draft)
    return _redirect(board, state)


@router.post("/reports/{report_id}/status")
async def change_status(
    report_id: str,
    request: Request,
    new_status: ReportStatus = Form(..., alias="status"),
    store: ReportStore = Depends(get_store),
) -> RedirectResponse:
    """Apply a status change immediately."""
    state = _state_from_form(await request.form())
    board = ReportBoard(store, tab=state.tab, search=state.q, selected_id=state.selected)
    await board.refresh()
    await board.change_status(report_id, new_status)
    return _redirect(board, state)


@router.post("/reports/{report_id}/delete")
async def confirm_delete(
    report_id: str,
    request: Request,
    update_id: str | None = Form(None),
    store: ReportStore = Depends(get_store),
) -> RedirectResponse:
    """Confirmed deletion of an update, or of the whole report."""
    state = _state_from_form(await request.form())
    board = ReportBoard(store, tab=state.tab, search=state.q, selected_id=state.selected)
    await board.refresh()
    report = board.get(report_id)
    if report is None:
        board.report_missing()
        return _redirect(board, state)

    detail = ReportDetail(board, report)
    if update_id:
        detail.request_delete_update(update_id)
    else:
        detail.request_delete_report()
    await detail.confirm_delete()
    return _redirect(board, state)


@router.post("/reports/{report_id}/updates")
async def add_update(
    report_id: str,
    request: Request,
    text: str = Form(""),
    store: ReportStore = Depends(get_store),
) -> RedirectResponse:
    """Append an update to a report."""
    state = _state_from_form(await request.form())
    board = ReportBoard(store, tab=state.tab, search=state.q, selected_id=state.selected)
    await board.refresh()
    report = board.get(report_id)
    if report is None:
        board.report_missing()
        return _redirect(board, state)

    await ReportDetail(board, report).add_update(text)
    return _redirect(board, state)
