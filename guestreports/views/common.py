# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shared view helpers: page state in the URL, escaping and date formatting."""

import datetime
from dataclasses import dataclass, replace
from html import escape
from urllib.parse import urlencode

from guestreports.models.enums import StatusTab

MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

DIALOG_NEW = "new"
DIALOG_EDIT = "edit"
DIALOG_CONFIRM = "confirm"


def esc(value: object) -> str:
    """HTML-escape any value for text or attribute context."""
    return escape(str(value), quote=True)


def format_datetime(value: datetime.datetime) -> str:
    """Long Spanish date with time, e.g. ``5 de marzo de 2024, 14:30``."""
    return (
        f"{value.day} de {MONTHS[value.month - 1]} de {value.year}, "
        f"{value.hour:02d}:{value.minute:02d}"
    )


def format_date(value: datetime.date) -> str:
    return value.isoformat()


@dataclass(frozen=True)
class PageState:
    """Everything the page shows besides store data, carried in the URL."""

    tab: StatusTab = StatusTab.ALL
    q: str = ""
    selected: str | None = None
    show_all: bool = False
    dialog: str | None = None
    update_id: str | None = None
    error: str | None = None

    def with_(self, **changes) -> "PageState":
        return replace(self, **changes)

    def params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.tab != StatusTab.ALL:
            params["tab"] = self.tab.value
        if self.q:
            params["q"] = self.q
        if self.selected is not None:
            params["selected"] = self.selected
        if self.show_all:
            params["show_all"] = "1"
        if self.dialog:
            params["dialog"] = self.dialog
        if self.update_id is not None:
            params["update_id"] = self.update_id
        if self.error:
            params["error"] = self.error
        return params

    def url(self, **changes) -> str:
        """Page URL for this state, with ``changes`` applied."""
        params = self.with_(**changes).params() if changes else self.params()
        return f"/?{urlencode(params)}" if params else "/"

    def hidden_fields(self) -> str:
        """Hidden inputs that carry the list/detail state through a form POST."""
        keep = {k: v for k, v in self.params().items() if k in ("tab", "q", "selected", "show_all")}
        return "".join(
            f'<input type="hidden" name="{esc(k)}" value="{esc(v)}">' for k, v in keep.items()
        )
