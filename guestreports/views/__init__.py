# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HTML views."""
from guestreports.views.common import PageState
from guestreports.views.layout import render_page
from guestreports.views.modal import render_confirmation, render_modal
from guestreports.views.report_detail import render_report_detail
from guestreports.views.report_form import render_report_form
from guestreports.views.report_list import render_report_list

__all__ = [
    "PageState",
    "render_confirmation",
    "render_modal",
    "render_page",
    "render_report_detail",
    "render_report_form",
    "render_report_list",
]
