from __future__ import annotations

import json
from unittest.mock import MagicMock

import requests

from timeclock_kiosk.core.enums import DirectoryOperation
from timeclock_kiosk.directory.http_adapter import HttpSyncAdapter
from timeclock_kiosk.directory.model import DirectoryEndpoints, SyncFailure, SyncSuccess

ENDPOINTS = DirectoryEndpoints.from_base_url("http://directory.test/webhook")


def _response(status: int, body=None, raw: bytes = None):
    resp = MagicMock(status_code=status, ok=200 <= status < 300)
    if raw is not None:
        resp.content = raw
    else:
        resp.content = json.dumps(body).encode() if body is not None else b""
    if body is not None:
        resp.json.return_value = body
    else:
        resp.json.side_effect = ValueError("no json")
    return resp


def test_get_employees_uses_get():
    session = MagicMock()
    session.get.return_value = _response(200, {"employees": []})
    adapter = HttpSyncAdapter(ENDPOINTS, timeout=5, session=session)

    result = adapter.call(DirectoryOperation.GET_EMPLOYEES)

    assert result == SyncSuccess({"employees": []})
    session.get.assert_called_once_with("http://directory.test/webhook/get-employees", timeout=5.0)
    session.post.assert_not_called()


def test_actions_post_json():
    session = MagicMock()
    session.post.return_value = _response(200, {"timesheetId": "T1"})
    adapter = HttpSyncAdapter(ENDPOINTS, session=session)

    result = adapter.call(DirectoryOperation.CLOCK_IN, {"employeeId": "1"})

    assert isinstance(result, SyncSuccess)
    assert result.body["timesheetId"] == "T1"
    args, kwargs = session.post.call_args
    assert args[0] == "http://directory.test/webhook/clock-in"
    assert kwargs["json"] == {"employeeId": "1"}


def test_non_success_status_is_failure():
    session = MagicMock()
    session.post.return_value = _response(500, {"error": "boom"})
    adapter = HttpSyncAdapter(ENDPOINTS, session=session)

    result = adapter.call(DirectoryOperation.CLOCK_OUT, {"timesheetId": "T1"})

    assert isinstance(result, SyncFailure)
    assert "500" in result.reason


def test_transport_error_is_failure():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("connection refused")
    adapter = HttpSyncAdapter(ENDPOINTS, session=session)

    result = adapter.call(DirectoryOperation.START_BREAK, {"timesheetId": "T1"})

    assert isinstance(result, SyncFailure)
    assert "connection refused" in result.reason


def test_empty_body_is_fine_for_break():
    session = MagicMock()
    session.post.return_value = _response(200)
    adapter = HttpSyncAdapter(ENDPOINTS, session=session)

    assert adapter.call(DirectoryOperation.END_BREAK, {"timesheetId": "T1"}) == SyncSuccess({})


def test_unreadable_body_fails_clock_in():
    session = MagicMock()
    session.post.return_value = _response(200, raw=b"<html>ok</html>")
    adapter = HttpSyncAdapter(ENDPOINTS, session=session)

    assert isinstance(adapter.call(DirectoryOperation.CLOCK_IN, {}), SyncFailure)


def test_headers_are_applied_to_session():
    session = MagicMock()
    session.headers = {}
    HttpSyncAdapter(ENDPOINTS, session=session, headers={"Authorization": "Bearer x"})

    assert session.headers["Authorization"] == "Bearer x"
