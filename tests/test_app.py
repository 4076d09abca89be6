from __future__ import annotations

from datetime import datetime

import pytest

from sheets_attendance.core.constants import ATTENDANCE_TABLE, CONFIRMATIONS_TABLE
from sheets_attendance.main import create_app


class Clock:
    def __init__(self, monkeypatch):
        self.now = datetime(2026, 2, 2, 7, 30)
        for target in (
            "sheets_attendance.attendance.service.now_local",
            "sheets_attendance.confirmations.service.now_local",
            "sheets_attendance.confirmations.controller.now_local",
        ):
            monkeypatch.setattr(target, lambda: self.now)

    def set(self, hh, mm):
        self.now = self.now.replace(hour=hh, minute=mm)


@pytest.fixture
def clock(monkeypatch):
    return Clock(monkeypatch)


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, pin):
    return client.post("/api/login", json={"pin": pin})


def test_login_and_me(client):
    resp = _login(client, "0423")
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"name": "Alice", "position": "Engineer", "role": "Employee"}

    assert client.get("/api/me").get_json()["data"]["name"] == "Alice"

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_login_errors(client):
    assert _login(client, "12").status_code == 400
    body = _login(client, "0000").get_json()
    assert body["error"] == "AuthenticationError"


def test_full_day_flow(client, store, clock):
    _login(client, "9999")
    board = client.get("/api/confirmations/board").get_json()
    assert board["window_open"] is True
    assert [e["confirmed"] for e in board["data"]] == [False, False]

    assert client.post("/api/confirmations", json={"employee_name": "Alice"}).status_code == 201
    again = client.post("/api/confirmations", json={"employee_name": "Alice"})
    assert again.status_code == 409
    assert again.get_json()["reason"] == "AlreadyConfirmed"
    assert len(store.records(CONFIRMATIONS_TABLE)) == 1

    client.post("/api/logout")
    _login(client, "0423")
    clock.set(8, 15)
    resp = client.post("/api/attendance/check-in", json={"photo_url": "in.jpg", "location": "gate"})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["check_in_status"] == "Late"

    early = client.post("/api/attendance/check-out", json={})
    assert early.status_code == 409
    assert early.get_json()["reason"] == "TooEarly"

    clock.set(17, 45)
    resp = client.post("/api/attendance/check-out", json={"photo_url": "out.jpg", "location": "gate"})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["work_duration"] == "9 hours 30 minutes"
    assert store.records(ATTENDANCE_TABLE)[0]["CheckOutStatus"] == "Present"

    history = client.get("/api/attendance/history").get_json()["data"]
    assert len(history) == 1
    assert client.get("/api/attendance/today").get_json()["data"]["check_out_time"] == "17:45"


def test_check_in_without_confirmation_is_conflict(client, clock):
    _login(client, "1111")
    resp = client.post("/api/attendance/check-in", json={"photo_url": "p", "location": "l"})
    assert resp.status_code == 409
    assert resp.get_json()["reason"] == "NotConfirmed"


def test_roles_are_enforced_per_route(client):
    _login(client, "0423")
    assert client.get("/api/leaves/pending").status_code == 403
    client.post("/api/logout")
    _login(client, "9999")
    assert client.post("/api/attendance/check-in", json={}).status_code == 403


def test_leave_flow(client, store):
    _login(client, "0423")
    resp = client.post("/api/leaves", json={"date": "2026-02-05", "leave_type": "Sick Leave", "reason": "flu"})
    assert resp.status_code == 201
    assert client.post("/api/leaves", json={"date": "2026-02-05", "leave_type": "Sick Leave"}).status_code == 400
    client.post("/api/logout")

    _login(client, "9999")
    pending = client.get("/api/leaves/pending").get_json()["data"]
    assert [p["name"] for p in pending] == ["Alice"]

    resp = client.post("/api/leaves/process", json={"date": "2026-02-05", "name": "Alice", "action": "Approve"})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["approval_status"] == "Approved"
    assert store.records(ATTENDANCE_TABLE)[0]["CheckOutStatus"] == "Leave"

    missing = client.post("/api/leaves/process", json={"date": "2026-02-05", "name": "Alice", "action": "Approve"})
    assert missing.status_code == 404


def test_store_failure_is_bad_gateway(client, store):
    store.fail_reads = True
    resp = _login(client, "0423")
    assert resp.status_code == 502
    assert resp.get_json()["error"] == "StoreError"
