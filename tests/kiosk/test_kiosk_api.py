from __future__ import annotations

import pytest

from timeclock_kiosk.core.enums import DirectoryOperation
from timeclock_kiosk.directory.model import SyncSuccess
from timeclock_kiosk.main import create_app

ROSTER = {
    "employees": [
        {"id": "1", "name": "Annabelle Cazals", "pinCode": "1234"},
        {"id": "2", "name": "Bohdan Zavhorodnii", "pinCode": "5678", "status": "ON_DUTY", "timesheetId": "T7"},
    ]
}


@pytest.fixture
def make_client(monkeypatch, adapter, scheduler):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_LOAD_ROSTER", "0")
    adapter.respond(DirectoryOperation.GET_EMPLOYEES, SyncSuccess(ROSTER))
    adapter.respond(DirectoryOperation.CLOCK_IN, SyncSuccess({"timesheetId": "T1"}))

    def _make(**overrides):
        app = create_app(overrides, adapter=adapter, scheduler=scheduler)
        client = app.test_client()
        client.post("/api/kiosk/roster/refresh")
        return client

    return _make


def test_state_lists_roster_without_pins(make_client):
    client = make_client()

    resp = client.get("/api/kiosk/state")

    assert resp.status_code == 200
    state = resp.get_json()["state"]
    assert state["rosterLoaded"] is True
    assert state["mode"] == "selection"
    assert state["employees"][1] == {"id": "2", "name": "Bohdan Zavhorodnii", "status": "ON_DUTY"}
    assert "pinCode" not in str(state)


def test_select_then_clock_in(make_client, adapter):
    client = make_client()

    resp = client.post("/api/kiosk/select", json={"employeeId": "1"})
    assert resp.get_json()["state"]["availableActions"] == ["clock-in"]

    resp = client.post("/api/kiosk/actions/clock-in")
    body = resp.get_json()
    assert body["result"] == "APPLIED"
    assert body["state"]["identified"]["status"] == "ON_DUTY"
    assert body["state"]["message"] == {"text": "Successfully clocked in!", "kind": "success"}
    assert len(adapter.calls_for(DirectoryOperation.CLOCK_IN)) == 1


def test_illegal_action_is_rejected(make_client, adapter):
    client = make_client()
    client.post("/api/kiosk/select", json={"employeeId": "2"})

    resp = client.post("/api/kiosk/actions/end-break")

    assert resp.status_code == 200
    assert resp.get_json()["result"] == "REJECTED"
    assert adapter.calls_for(DirectoryOperation.END_BREAK) == []


def test_unknown_action_slug(make_client):
    client = make_client()

    assert client.post("/api/kiosk/actions/teleport").status_code == 404


def test_select_requires_employee_id(make_client):
    client = make_client()

    assert client.post("/api/kiosk/select", json={}).status_code == 400


def test_pin_mode_keypad(make_client):
    client = make_client(identification_mode="pin")

    for key in "5678":
        client.post("/api/kiosk/pin/key", json={"key": key})
    resp = client.post("/api/kiosk/pin/key", json={"key": "Enter"})

    body = resp.get_json()
    assert body["identified"] is True
    assert body["state"]["identified"]["id"] == "2"
    assert body["state"]["availableActions"] == ["start-break", "clock-out"]


def test_cancel(make_client):
    client = make_client()
    client.post("/api/kiosk/select", json={"employeeId": "1"})

    resp = client.post("/api/kiosk/cancel")

    assert resp.get_json()["result"] == "APPLIED"
    assert resp.get_json()["state"]["identified"] is None


@pytest.mark.parametrize("path", ["/api/kiosk/select", "/api/kiosk/pin/key"])
@pytest.mark.parametrize("payload", [["1"], "1", 5])
def test_non_object_body_is_bad_request(make_client, path, payload):
    client = make_client()

    resp = client.post(path, json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
