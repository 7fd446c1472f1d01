# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the HTML pages."""

from urllib.parse import parse_qs, urlparse

from conftest import make_update
from guestreports.models.enums import ReportStatus
from guestreports.schemas.report import ROOM_NUMBER_MESSAGE
from guestreports.services.report_service import DELETE_REPORT_MESSAGE, DELETE_UPDATE_MESSAGE
from guestreports.views.report_detail import PLACEHOLDER

NEW_REPORT = {
    "guest_name": "Diego Ruiz",
    "room_number": "404",
    "agency": "Booking",
    "arrival_date": "2024-04-01",
    "departure_date": "2024-04-03",
    "incident_report": "La llave no abre",
}


def query(response) -> dict[str, list[str]]:
    return parse_qs(urlparse(response.headers["location"]).query)


class TestIndex:
    """Tests for GET /."""

    def test_lists_all_reports(self, client):
        """Test the default page shows every report and no detail."""
        response = client.get("/")
        assert response.status_code == 200
        assert "Registro de Reportes de Oportunidad" in response.text
        for report_id in ("1", "2", "3"):
            assert f'data-report-id="{report_id}"' in response.text
        assert PLACEHOLDER in response.text

    def test_tab_filter(self, client):
        response = client.get("/", params={"tab": "abierto"})
        assert 'data-report-id="1"' in response.text
        assert 'data-report-id="2"' not in response.text

    def test_search_filter(self, client):
        response = client.get("/", params={"q": "viajes"})
        assert 'class="card" href="/?q=viajes&amp;selected=3"' in response.text
        assert 'data-report-id="1"' not in response.text

    def test_unknown_tab_is_rejected(self, client):
        response = client.get("/", params={"tab": "archivado"})
        assert response.status_code == 422

    def test_selected_report_detail(self, client, store):
        """Test selecting a report loads its updates, newest first."""
        store.reports["2"].updates.extend([make_update("a", "primera nota", 1), make_update("b", "segunda nota", 2)])

        response = client.get("/", params={"selected": "2"})

        assert response.status_code == 200
        assert '<div class="panel detail" data-report-id="2">' in response.text
        assert "segunda nota" in response.text
        assert "primera nota" not in response.text
        assert "Ver todas las actualizaciones" in response.text
        assert store.call_names() == ["list_reports", "get_report"]

    def test_show_all_updates(self, client, store):
        store.reports["2"].updates.extend([make_update("a", "primera nota", 1), make_update("b", "segunda nota", 2)])

        response = client.get("/", params={"selected": "2", "show_all": "1"})

        assert response.text.index("segunda nota") < response.text.index("primera nota")
        assert "Ocultar actualizaciones" in response.text

    def test_new_report_dialog(self, client):
        response = client.get("/", params={"dialog": "new"})
        assert 'action="/reports"' in response.text
        assert "Crear reporte" in response.text

    def test_edit_dialog_is_prefilled(self, client):
        response = client.get("/", params={"selected": "2", "dialog": "edit"})
        assert 'action="/reports/2"' in response.text
        assert 'value="Beto"' in response.text

    def test_delete_report_dialog(self, client):
        response = client.get("/", params={"selected": "1", "dialog": "confirm"})
        assert DELETE_REPORT_MESSAGE in response.text
        assert 'action="/reports/1/delete"' in response.text
        assert 'name="update_id"' not in response.text

    def test_delete_update_dialog(self, client, store):
        store.reports["1"].updates.append(make_update("u9", "nota", 1))

        response = client.get("/", params={"selected": "1", "dialog": "confirm", "update_id": "u9"})

        assert DELETE_UPDATE_MESSAGE in response.text
        assert '<input type="hidden" name="update_id" value="u9">' in response.text

    def test_store_down_shows_banner(self, client, store):
        store.failing.add("list_reports")

        response = client.get("/")

        assert response.status_code == 200
        assert "No se pudieron cargar los reportes" in response.text
        assert "No hay reportes" in response.text

    def test_error_parameter_shows_banner(self, client):
        response = client.get("/", params={"error": "No se pudo eliminar el reporte"})
        assert 'role="alert">No se pudo eliminar el reporte' in response.text


class TestCreate:
    """Tests for POST /reports."""

    def test_create_redirects_and_opens(self, client, store):
        response = client.post("/reports", data=NEW_REPORT | {"tab": "abierto"})

        assert response.status_code == 303
        assert response.headers["location"] == "/?tab=abierto"
        created = [r for r in store.reports.values() if r.guest_name == "Diego Ruiz"]
        assert len(created) == 1
        assert created[0].status == ReportStatus.OPEN

    def test_invalid_room_number_redisplays_form(self, client, store):
        response = client.post("/reports", data=NEW_REPORT | {"room_number": "12a"})

        assert response.status_code == 422
        assert ROOM_NUMBER_MESSAGE in response.text
        assert 'value="12a"' in response.text
        assert 'value="Diego Ruiz"' in response.text
        assert "create_report" not in store.call_names()

    def test_missing_required_fields(self, client, store):
        response = client.post("/reports", data={"guest_name": "Diego"})

        assert response.status_code == 422
        assert response.text.count('class="field-error"') == 4

    def test_store_failure_keeps_form(self, client, store):
        store.failing.add("create_report")

        response = client.post("/reports", data=NEW_REPORT)

        assert response.status_code == 502
        assert "No se pudo crear el reporte" in response.text
        assert 'value="Diego Ruiz"' in response.text


class TestEdit:
    """Tests for POST /reports/{id}."""

    def test_edit_keeps_status_and_updates(self, client, store):
        store.reports["2"].updates.append(make_update("u1", "Llamada", 5))
        data = NEW_REPORT | {"guest_name": "Roberto", "room_number": "202", "selected": "2"}

        response = client.post("/reports/2", data=data)

        assert response.status_code == 303
        assert query(response) == {"selected": ["2"]}
        edited = store.reports["2"]
        assert edited.guest_name == "Roberto"
        assert edited.status == ReportStatus.CLOSED
        assert [u.id for u in edited.updates] == ["u1"]

    def test_invalid_edit_redisplays_form(self, client, store):
        response = client.post("/reports/2", data=NEW_REPORT | {"guest_name": ""})

        assert response.status_code == 422
        assert "Guardar cambios" in response.text
        assert "update_report" not in store.call_names()


class TestStatusChange:
    """Tests for POST /reports/{id}/status."""

    def test_change_status(self, client, store):
        response = client.post("/reports/1/status", data={"status": "cerrado", "selected": "1", "tab": "abierto"})

        assert response.status_code == 303
        assert query(response) == {"tab": ["abierto"], "selected": ["1"]}
        assert store.reports["1"].status == ReportStatus.CLOSED

    def test_invalid_status(self, client, store):
        response = client.post("/reports/1/status", data={"status": "archivado"})

        assert response.status_code == 422
        assert store.reports["1"].status == ReportStatus.OPEN

    def test_failure_is_reported_in_redirect(self, client, store):
        store.failing.add("update_report")

        response = client.post("/reports/1/status", data={"status": "cerrado", "selected": "1"})

        assert query(response)["error"] == ["No se pudo actualizar el reporte"]
        assert store.reports["1"].status == ReportStatus.OPEN


class TestDelete:
    """Tests for POST /reports/{id}/delete."""

    def test_delete_selected_report_clears_selection(self, client, store):
        response = client.post("/reports/1/delete", data={"selected": "1", "q": "a"})

        assert response.status_code == 303
        assert response.headers["location"] == "/?q=a"
        assert "1" not in store.reports

    def test_delete_update_only(self, client, store):
        store.reports["1"].updates.extend([make_update("a", "uno", 1), make_update("b", "dos", 2)])

        response = client.post("/reports/1/delete", data={"selected": "1", "update_id": "a"})

        assert response.status_code == 303
        assert query(response) == {"selected": ["1"]}
        assert [u.id for u in store.reports["1"].updates] == ["b"]

    def test_missing_report(self, client, store):
        response = client.post("/reports/99/delete", data={})

        assert query(response)["error"] == ["El reporte ya no existe"]
        assert "delete_report" not in store.call_names()


class TestUpdates:
    """Tests for POST /reports/{id}/updates."""

    def test_add_update(self, client, store):
        response = client.post("/reports/3/updates", data={"text": " Se ofreció cortesía ", "selected": "3"})

        assert response.status_code == 303
        assert [u.text for u in store.reports["3"].updates] == ["Se ofreció cortesía"]

    def test_blank_update_is_ignored(self, client, store):
        response = client.post("/reports/3/updates", data={"text": "   ", "selected": "3"})

        assert response.status_code == 303
        assert "add_update" not in store.call_names()


class TestHealth:
    """Tests for GET /health."""

    def test_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "store": "Connected"}

    def test_degraded(self, client, store):
        store.failing.add("health_check")
        response = client.get("/health")
        assert response.json() == {"status": "degraded", "store": "Connection failed"}


class TestStoreOutageDuringMutation:
    """Tests for mutations when the report list cannot be loaded."""

    def test_status_change(self, client, store):
        store.failing.add("list_reports")

        response = client.post("/reports/1/status", data={"status": "cerrado", "selected": "1"})

        assert query(response)["error"] == ["No se pudieron cargar los reportes"]
        assert store.reports["1"].status == ReportStatus.OPEN

    def test_add_update(self, client, store):
        store.failing.add("list_reports")

        response = client.post("/reports/1/updates", data={"text": "nota", "selected": "1"})

        assert query(response)["error"] == ["No se pudieron cargar los reportes"]
        assert "add_update" not in store.call_names()

    def test_delete(self, client, store):
        store.failing.add("list_reports")

        response = client.post("/reports/1/delete", data={"selected": "1"})

        assert query(response)["error"] == ["No se pudieron cargar los reportes"]
        assert "1" in store.reports

    def test_edit(self, client, store):
        store.failing.add("list_reports")

        response = client.post("/reports/2", data=NEW_REPORT | {"selected": "2"})

        assert query(response)["error"] == ["No se pudieron cargar los reportes"]
        assert store.reports["2"].guest_name == "Beto"


def test_invalid_edit_of_missing_report_explains(client, store):
    response = client.post("/reports/99", data=NEW_REPORT | {"guest_name": ""})

    assert response.status_code == 422
    assert 'role="alert">El reporte ya no existe' in response.text
