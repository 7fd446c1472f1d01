# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the JSON report endpoints."""

from conftest import make_update


class TestReportListEndpoint:
    """Tests for GET /api/v1/reports."""

    def test_list_all(self, client):
        response = client.get("/api/v1/reports")
        assert response.status_code == 200
        data = response.json()
        assert [r["id"] for r in data["data"]] == ["1", "2", "3"]
        assert data["counts"] == {"todos": 3, "abierto": 1, "en proceso": 1, "cerrado": 1}

    def test_local_field_names(self, client):
        report = client.get("/api/v1/reports").json()["data"][0]
        assert report["guest_name"] == "Ana"
        assert report["room_number"] == "101"
        assert report["status"] == "abierto"
        assert report["arrival_date"] == "2024-03-01"
        assert report["updates"] == []

    def test_filters_do_not_change_counts(self, client):
        response = client.get("/api/v1/reports", params={"tab": "en proceso", "q": "ANAYA"})
        data = response.json()
        assert [r["id"] for r in data["data"]] == ["3"]
        assert data["counts"]["todos"] == 3

    def test_unknown_tab(self, client):
        response = client.get("/api/v1/reports", params={"tab": "archivado"})
        assert response.status_code == 422

    def test_store_unavailable(self, client, store):
        store.failing.add("list_reports")
        response = client.get("/api/v1/reports")
        assert response.status_code == 502


class TestReportDetailEndpoint:
    """Tests for GET /api/v1/reports/{report_id}."""

    def test_updates_newest_first(self, client, store):
        store.reports["1"].updates.extend([make_update("a", "uno", 1), make_update("b", "dos", 2)])

        response = client.get("/api/v1/reports/1")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()["updates"]] == ["b", "a"]

    def test_not_found(self, client):
        response = client.get("/api/v1/reports/99")
        assert response.status_code == 404
        assert response.json()["detail"] == "Report not found"

    def test_store_unavailable(self, client, store):
        store.failing.add("get_report")
        response = client.get("/api/v1/reports/1")
        assert response.status_code == 502
