# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Overlay dialog primitives."""

from guestreports.views.common import esc


def render_modal(body: str, close_href: str, title: str = "") -> str:
    """Generic overlay around already-rendered ``body`` HTML."""
    heading = f'<h2 class="modal-title">{esc(title)}</h2>' if title else ""
    return (
        '<div class="modal-backdrop">'
        '<div class="modal" role="dialog" aria-modal="true">'
        f'<a class="modal-close" href="{esc(close_href)}" aria-label="Cerrar">&times;</a>'
        f"{heading}{body}"
        "</div></div>"
    )


def render_confirmation(
    message: str,
    action: str,
    cancel_href: str,
    hidden: str = "",
) -> str:
    """Yes/no dialog; confirming POSTs ``action`` with ``hidden`` inputs."""
    body = (
        f'<p class="confirm-message">{esc(message)}</p>'
        f'<form method="post" action="{esc(action)}" class="confirm-actions">'
        f"{hidden}"
        '<button type="submit" class="btn btn-danger">Confirmar</button>'
        f'<a class="btn" href="{esc(cancel_href)}">Cancelar</a>'
        "</form>"
    )
    return render_modal(body, cancel_href, title="Confirmar eliminación")
