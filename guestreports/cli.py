# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Command line entry point: serve the desk, check the store, list reports."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from guestreports.config import Settings, get_settings
from guestreports.integrations.rest_store import RestReportStore
from guestreports.models.enums import StatusTab
from guestreports.models.report import Report
from guestreports.services.report_service import ReportBoard


def format_report_line(report: Report) -> str:
    """One text line per report for terminal listings."""
    agency = f" ({report.agency})" if report.agency else ""
    return (
        f"{report.id:>6}  [{report.status.label}]  "
        f"Hab. {report.room_number}  {report.guest_name}{agency}"
    )


async def check_store(settings: Settings) -> int:
    """Print store connectivity; exit code 0 when reachable."""
    store = RestReportStore(settings.store_url, timeout=settings.store_timeout)
    try:
        ok, message = await store.health_check()
    finally:
        await store.close()
    print(f"Report store {settings.store_url}: {message}")
    return 0 if ok else 1


async def list_reports(settings: Settings, tab: StatusTab, search: str) -> int:
    """Print the reports passing the tab and search filters."""
    store = RestReportStore(settings.store_url, timeout=settings.store_timeout)
    board = ReportBoard(store, tab=tab, search=search)
    try:
        loaded = await board.refresh()
    finally:
        await store.close()
    if not loaded:
        print(board.last_error, file=sys.stderr)
        return 1
    reports = board.visible_reports
    for report in reports:
        print(format_report_line(report))
    if not reports:
        print("No hay reportes para mostrar en esta categoría.")
    return 0


def serve(settings: Settings, host: str, port: int) -> int:
    import uvicorn

    uvicorn.run(
        "guestreports.main:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guestreports",
        description="Guest opportunity report desk.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve_parser = sub.add_parser("serve", help="Run the web desk.")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: from settings).")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: from settings).")

    sub.add_parser("check", help="Check that the report store answers.")

    list_parser = sub.add_parser("list", help="Print reports.")
    list_parser.add_argument(
        "--tab",
        choices=[t.value for t in StatusTab],
        default=StatusTab.ALL.value,
        help="Status tab to show (default: todos).",
    )
    list_parser.add_argument(
        "--search",
        default="",
        help="Match guest name, room number or agency.",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        return serve(settings, args.host or settings.host, args.port or settings.port)
    if args.command == "check":
        return asyncio.run(check_store(settings))
    return asyncio.run(list_reports(settings, StatusTab(args.tab), args.search))


def main() -> None:
    """Entry point for the guestreports console script."""
    sys.exit(run())


if __name__ == "__main__":
    main()
