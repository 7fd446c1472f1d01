# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the command line entry point."""

import pytest

from guestreports import cli
from guestreports.config import Settings


@pytest.fixture
def fake_rest_store(monkeypatch, store):
    """Route every RestReportStore the CLI builds to the in-memory store."""
    closed = []

    async def close():
        closed.append(True)

    store.close = close
    monkeypatch.setattr(cli, "RestReportStore", lambda url, timeout=None: store)
    store.closed = closed
    return store


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, store_url="http://store.test/api")


def test_format_report_line(sample_reports):
    line = cli.format_report_line(sample_reports[2])

    assert "[En proceso]" in line
    assert "Hab. 303" in line
    assert "Carla Anaya (Viajes Sol)" in line


@pytest.mark.asyncio
async def test_list_filters_by_tab(fake_rest_store, settings, capsys):
    code = await cli.list_reports(settings, cli.StatusTab.CLOSED, "")

    out = capsys.readouterr().out
    assert code == 0
    assert "Beto" in out
    assert "Ana" not in out
    assert fake_rest_store.closed


@pytest.mark.asyncio
async def test_list_with_no_matches(fake_rest_store, settings, capsys):
    code = await cli.list_reports(settings, cli.StatusTab.ALL, "zzz")

    assert code == 0
    assert "No hay reportes" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_list_store_failure(fake_rest_store, settings, capsys):
    fake_rest_store.failing.add("list_reports")

    code = await cli.list_reports(settings, cli.StatusTab.ALL, "")

    assert code == 1
    assert "No se pudieron cargar los reportes" in capsys.readouterr().err
    assert fake_rest_store.closed


@pytest.mark.asyncio
async def test_check_reports_store_state(fake_rest_store, settings, capsys):
    assert await cli.check_store(settings) == 0
    assert "Connected" in capsys.readouterr().out

    fake_rest_store.failing.add("health_check")
    assert await cli.check_store(settings) == 1


def test_run_dispatches_list(fake_rest_store, capsys):
    assert cli.run(["list", "--tab", "abierto"]) == 0
    assert "Ana" in capsys.readouterr().out


def test_parser_rejects_unknown_tab():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["list", "--tab", "archivado"])


def test_serve_uses_settings_defaults(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "serve", lambda settings, host, port: calls.append((host, port)) or 0)

    assert cli.run(["serve", "--port", "9001"]) == 0
    assert calls == [("127.0.0.1", 9001)]
